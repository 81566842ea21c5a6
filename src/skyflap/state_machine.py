"""
state_machine.py: Mode transitions for a play session.

Modes:
    IDLE: Bird sways, no pipes, start prompt shown
    PLAYING: Full simulation
    TERMINAL: Simulation frozen, run summary shown
"""

import logging
from typing import Callable, List, Tuple

from .data_models import Mode

logger = logging.getLogger(__name__)

Listener = Callable[[Mode, Mode], None]


class StateMachine:
    """
    Owns the current mode and refuses any transition not in the table.

    Listeners are told about every change, including the reset back to IDLE,
    which is how the UI shows and hides its screens.
    """

    VALID_TRANSITIONS: List[Tuple[Mode, Mode]] = [
        (Mode.IDLE, Mode.PLAYING),      # First flap
        (Mode.PLAYING, Mode.TERMINAL),  # Collision
        (Mode.TERMINAL, Mode.IDLE),     # Explicit restart
    ]

    def __init__(self, initial_mode: Mode = Mode.IDLE):
        self._mode = initial_mode
        self._listeners: List[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def mode(self) -> Mode:
        return self._mode

    def can_transition(self, to_mode: Mode) -> bool:
        return (self._mode, to_mode) in self._valid_transitions

    def transition(self, to_mode: Mode) -> bool:
        """Moves to `to_mode` if legal. Returns False (and stays put) otherwise."""
        if not self.can_transition(to_mode):
            logger.warning("Invalid transition: %s -> %s", self._mode.name, to_mode.name)
            return False

        old_mode = self._mode
        self._mode = to_mode
        logger.info("Mode transition: %s -> %s", old_mode.name, to_mode.name)

        for listener in self._listeners:
            try:
                listener(old_mode, to_mode)
            except Exception:
                logger.exception("Error in mode listener")
        return True

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

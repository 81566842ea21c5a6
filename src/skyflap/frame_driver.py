"""
frame_driver.py: Once-per-refresh sequencing of input, simulation and rendering.
"""

import logging
from typing import Callable, Optional

from .data_models import Mode, RenderModel
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
RenderFn = Callable[[RenderModel], None]


class FrameDriver:
    """
    Drives a GameEngine from a stream of monotonically increasing timestamps.

    Input arrives between frames as edge-triggered requests. They are only
    recorded here and applied at the start of the next tick, so the engine
    is never mutated mid-frame.
    """

    def __init__(self, engine: GameEngine, render: Optional[RenderFn] = None):
        self.engine = engine
        self.render = render
        self.last_time = 0.0
        self.last_dt = 0.0
        self.frame_count = 0
        self._jump_requested = False
        self._restart_requested = False

    # -------- Input edges --------

    def request_jump(self) -> bool:
        """Queues a flap. Refused while the run summary is up."""
        if self.engine.mode is Mode.TERMINAL:
            return False
        self._jump_requested = True
        return True

    def request_restart(self) -> None:
        self._restart_requested = True

    def _consume_inputs(self, now: float) -> None:
        restart, jump = self._restart_requested, self._jump_requested
        self._restart_requested = self._jump_requested = False

        if restart:
            self.engine.restart()
        if jump:
            self.engine.jump(now)

    # -------- Frame loop --------

    def tick(self, timestamp: float) -> RenderModel:
        """Runs one frame at `timestamp` (milliseconds) and returns what should be drawn."""
        self._consume_inputs(timestamp)

        self.last_dt = timestamp - self.last_time
        self.last_time = timestamp
        self.frame_count += 1

        if self.engine.mode is Mode.IDLE:
            self.engine.idle_step()
        self.engine.update(timestamp)

        model = self.engine.render_model()
        if self.render is not None:
            self.render(model)
        return model

    def run(
        self,
        clock: Clock,
        keep_running: Callable[[], bool] = lambda: True,
        before_frame: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Ticks forever, or until `keep_running` says otherwise.
        `before_frame` is where the host pumps input and paces the loop.
        """
        logger.debug("Frame loop started")
        while keep_running():
            if before_frame is not None:
                before_frame()
                if not keep_running():
                    break
            self.tick(clock())
        logger.debug("Frame loop stopped after %d frames", self.frame_count)

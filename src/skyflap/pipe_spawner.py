"""
pipe_spawner.py: Procedural pipe generation on a wall-clock interval.
"""

import logging
import random
from typing import Optional, Tuple

from .config import GameConfig
from .data_models import Pipe, Session

logger = logging.getLogger(__name__)


class PipeSpawner:
    """Appends a new pipe whenever the spawn interval has elapsed since the last one."""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def top_height(self, viewport_height: float) -> float:
        """
        Uniform draw inside the allowed band. A viewport too short for the
        band collapses it onto its lower bound.
        """
        cfg = self.config
        min_y = cfg.pipe_spawn_margin
        max_y = viewport_height - cfg.ground_height - cfg.pipe_gap - cfg.pipe_spawn_margin
        if max_y < min_y:
            return float(min_y)
        return min_y + self.rng.random() * (max_y - min_y)

    def spawn(self, session: Session, viewport: Tuple[float, float]) -> Pipe:
        width, height = viewport
        cfg = self.config
        pipe = Pipe(
            x=width + cfg.pipe_overscan,
            top_h=self.top_height(height),
            width=cfg.pipe_width,
            gap=cfg.pipe_gap,
        )
        session.pipes.append(pipe)
        logger.debug("Spawned pipe at x=%.1f top_h=%.1f", pipe.x, pipe.top_h)
        return pipe

    def maybe_spawn(self, session: Session, now: float, viewport: Tuple[float, float]) -> Optional[Pipe]:
        """Spawns if strictly more than the interval has passed; the timer restarts at `now`."""
        if now - session.last_pipe_time > self.config.pipe_spawn_interval:
            pipe = self.spawn(session, viewport)
            session.last_pipe_time = now
            return pipe
        return None

"""
game_engine.py: The single-player simulation tying physics, pipes, scoring and modes together.
"""

import logging
import random
from typing import Callable, Optional, Tuple

from .config import GameConfig
from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import Mode, PipeView, RenderModel, Session
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .score_db import ScoreStore
from .scoring import Scorer
from .state_machine import StateMachine

logger = logging.getLogger(__name__)

ViewportProvider = Callable[[], Tuple[float, float]]


def fixed_viewport(width: float = SCREEN_WIDTH, height: float = SCREEN_HEIGHT) -> ViewportProvider:
    return lambda: (width, height)


class GameEngine:
    """
    Owns the session and applies one frame of simulation at a time.

    The viewport is read through `viewport` whenever a size is needed, so a
    resized window takes effect on the next operation.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        viewport: Optional[ViewportProvider] = None,
        rng: Optional[random.Random] = None,
        store: Optional[ScoreStore] = None,
    ):
        self.config = config or GameConfig()
        self.viewport = viewport or fixed_viewport()
        self.physics = PhysicsCore(self.config)
        self.spawner = PipeSpawner(self.config, rng)
        self.scorer = Scorer(self.config, store)
        self.state = StateMachine()
        self.idle_phase = 0.0
        self.session = Session.fresh(self.config, self.viewport())

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def best_score(self) -> int:
        return self.scorer.best_score

    def _reset(self) -> None:
        """Replaces the whole session: fresh bird, no pipes, score 0."""
        self.session = Session.fresh(self.config, self.viewport())

    # -------- Player actions --------

    def jump(self, now: float) -> bool:
        """Flap. Starts the run from IDLE; ignored once the run has ended."""
        if self.mode is Mode.IDLE:
            self.physics.flap(self.session.bird, pose=False)
            self.session.last_pipe_time = now
            self.state.transition(Mode.PLAYING)
            return True
        if self.mode is Mode.PLAYING:
            self.physics.flap(self.session.bird)
            return True
        return False

    def restart(self) -> bool:
        """Back to IDLE with a fresh session. Only honoured after a run has ended."""
        if self.mode is not Mode.TERMINAL:
            return False
        self._reset()
        self.state.transition(Mode.IDLE)
        return True

    # -------- Per-frame updates --------

    def idle_step(self) -> None:
        if self.mode is Mode.IDLE:
            _, height = self.viewport()
            self.idle_phase = self.physics.idle_sway(self.session.bird, self.idle_phase, height)

    def update(self, now: float) -> bool:
        """
        Advances the running game by one frame. No-op outside PLAYING.
        Returns True if this frame ended the run.
        """
        if self.mode is not Mode.PLAYING:
            return False

        cfg = self.config
        session = self.session
        bird = session.bird
        width, height = self.viewport()

        # 1. Bird physics
        self.physics.apply_gravity_and_movement(bird)

        # 2. Background scroll
        session.bg_offset = (session.bg_offset + cfg.pipe_speed * cfg.parallax_factor) % cfg.bg_tile

        # 3. Spawn
        self.spawner.maybe_spawn(session, now, (width, height))

        # 4. Move, score and expire pipes
        for pipe in session.pipes:
            pipe.x -= cfg.pipe_speed
        self.scorer.award(session)
        session.pipes = [p for p in session.pipes if p.right >= -cfg.pipe_expire_slack]

        # 5. Collisions
        if self.physics.check_collision(bird, session.pipes, height):
            self._die()
            return True
        return False

    def _die(self) -> None:
        logger.info("Run ended with score %d", self.session.score)
        self.scorer.finalize(self.session.score)
        self.state.transition(Mode.TERMINAL)

    def render_model(self) -> RenderModel:
        session = self.session
        bird = session.bird
        return RenderModel(
            mode=self.mode,
            viewport=self.viewport(),
            ground_height=self.config.ground_height,
            bird_x=bird.x,
            bird_y=bird.y,
            bird_w=bird.w,
            bird_h=bird.h,
            bird_rotation=bird.rotation,
            bird_flapping=bird.flap_frame > 0,
            pipes=tuple(PipeView(p.x, p.top_h, p.width, p.gap) for p in session.pipes),
            bg_offset=session.bg_offset,
            score=session.score,
            best_score=self.best_score,
        )

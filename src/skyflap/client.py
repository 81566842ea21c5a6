"""
client.py: pygame window, input mapping and the frame loop.
"""

import logging
import random
from typing import Optional

import pygame

from .config import GameConfig
from .constants import RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from .data_models import Mode
from .frame_driver import FrameDriver
from .game_engine import GameEngine
from .renderer import Renderer, restart_button_rect
from .score_db import ScoreStore

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)


class FlappyClient:
    def __init__(
        self,
        store: ScoreStore,
        config: Optional[GameConfig] = None,
        size=(SCREEN_WIDTH, SCREEN_HEIGHT),
        fps: int = RENDER_FPS,
        seed: Optional[int] = None,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.fps = fps
        self.clock = pygame.time.Clock()
        self.running = False

        # --- Game Logic ---
        self.engine = GameEngine(
            config=config,
            viewport=self.screen.get_size,
            rng=random.Random(seed),
            store=store,
        )
        self.engine.state.add_listener(self._on_mode_change)
        self.renderer = Renderer(self.screen)
        self.driver = FrameDriver(self.engine, render=self.renderer)

    def run(self):
        """The main client execution loop."""
        self.running = True
        logger.info("Starting, best score %d", self.engine.best_score)
        try:
            self.driver.run(
                clock=pygame.time.get_ticks,
                keep_running=lambda: self.running,
                before_frame=self._pump,
            )
        finally:
            pygame.quit()

    def _pump(self):
        """Paces the loop and turns pygame events into driver requests."""
        self.clock.tick(self.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in JUMP_KEYS:
                    self.driver.request_jump()
                elif event.key in RESTART_KEYS and self.engine.mode is Mode.TERMINAL:
                    self.driver.request_restart()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._pointer_down(event.pos)
            elif event.type == pygame.FINGERDOWN:
                width, height = self.screen.get_size()
                self._pointer_down((event.x * width, event.y * height))
            elif event.type == pygame.VIDEORESIZE:
                logger.debug("Viewport resized to %sx%s", event.w, event.h)

    def _pointer_down(self, pos):
        if self.engine.mode is Mode.TERMINAL:
            if restart_button_rect(self.screen.get_size()).collidepoint(pos):
                self.driver.request_restart()
            return
        self.driver.request_jump()

    def _on_mode_change(self, old: Mode, new: Mode):
        if new is Mode.TERMINAL:
            logger.info("Game over: score %d, best %d", self.engine.session.score, self.engine.best_score)

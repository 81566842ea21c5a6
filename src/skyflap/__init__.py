"""
skyflap: a one-button side-scroller. Flap through the gaps, one point per pipe.
"""

from .config import GameConfig
from .data_models import Bird, Mode, Pipe, RenderModel, Session
from .frame_driver import FrameDriver
from .game_engine import GameEngine, fixed_viewport
from .score_db import ScoreStore

__version__ = "0.1.0"

__all__ = [
    "Bird",
    "FrameDriver",
    "GameConfig",
    "GameEngine",
    "Mode",
    "Pipe",
    "RenderModel",
    "ScoreStore",
    "Session",
    "fixed_viewport",
]

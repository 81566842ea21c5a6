"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import GameConfig


class Mode(Enum):
    """Session modes. Only IDLE -> PLAYING -> TERMINAL -> IDLE is legal."""
    IDLE = "idle"
    PLAYING = "playing"
    TERMINAL = "terminal"


@dataclass
class Bird:
    """The controlled actor. x is fixed once the session is created; y is its center."""
    x: float
    y: float
    w: float
    h: float
    vy: float = 0.0
    rotation: float = 0.0       # Degrees, cosmetic
    flap_frame: int = 0         # > 0 while the wings-up pose is shown

    @property
    def top(self) -> float:
        return self.y - self.h / 2

    @property
    def bottom(self) -> float:
        return self.y + self.h / 2

    @property
    def left(self) -> float:
        return self.x - self.w / 2

    @property
    def right(self) -> float:
        return self.x + self.w / 2


@dataclass
class Pipe:
    """A top/bottom pipe pair. top_h is the lower edge of the top segment."""
    x: float
    top_h: float
    width: float
    gap: float
    scored: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.top_h + self.gap


@dataclass
class Session:
    """
    Everything one run owns. Replaced wholesale on restart. The mode lives in
    the StateMachine, the best score with the Scorer and the idle sway phase
    with the GameEngine, so that they survive it.
    """
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    last_pipe_time: float = 0.0
    bg_offset: float = 0.0

    @classmethod
    def fresh(cls, config: GameConfig, viewport: Tuple[float, float]) -> "Session":
        """A new session with the bird at its default position."""
        width, height = viewport
        bird = Bird(
            x=width * config.bird_x_ratio,
            y=height * config.bird_y_ratio,
            w=config.bird_width,
            h=config.bird_height,
        )
        return cls(bird=bird)


@dataclass(frozen=True)
class PipeView:
    x: float
    top_h: float
    width: float
    gap: float


@dataclass(frozen=True)
class RenderModel:
    """Read-only snapshot of one frame, consumed by the renderer."""
    mode: Mode
    viewport: Tuple[float, float]
    ground_height: float
    bird_x: float
    bird_y: float
    bird_w: float
    bird_h: float
    bird_rotation: float
    bird_flapping: bool
    pipes: Tuple[PipeView, ...]
    bg_offset: float
    score: int
    best_score: int

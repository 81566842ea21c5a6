import random

import pytest

from skyflap.config import GameConfig
from skyflap.frame_driver import FrameDriver
from skyflap.game_engine import GameEngine, fixed_viewport
from skyflap.score_db import ScoreStore

WIDTH = 480
HEIGHT = 600


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def store():
    s = ScoreStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def engine(config, store):
    return GameEngine(
        config=config,
        viewport=fixed_viewport(WIDTH, HEIGHT),
        rng=random.Random(1234),
        store=store,
    )


@pytest.fixture
def driver(engine):
    return FrameDriver(engine)


def crash(engine, now):
    """Drops the bird onto the ground so the next update ends the run."""
    bird = engine.session.bird
    bird.y = engine.config.groundline(HEIGHT) - bird.h / 2
    bird.vy = 0.0
    return engine.update(now)

import random

from skyflap.config import GameConfig
from skyflap.data_models import Session
from skyflap.pipe_spawner import PipeSpawner


def make_session():
    return Session.fresh(GameConfig(), (480, 600))


def test_top_height_stays_in_band():
    spawner = PipeSpawner(GameConfig(), random.Random(3))
    # 800 - 80 ground - 150 gap - 80 margin
    heights = [spawner.top_height(800) for _ in range(500)]
    assert all(80 <= h <= 490 for h in heights)
    assert max(heights) - min(heights) > 200


def test_degenerate_band_clamps_to_lower_bound():
    spawner = PipeSpawner(GameConfig(), random.Random(3))
    assert spawner.top_height(300) == 80
    assert spawner.top_height(390) == 80


def test_seeded_generation_is_reproducible():
    a = PipeSpawner(GameConfig(), random.Random(99))
    b = PipeSpawner(GameConfig(), random.Random(99))
    assert [a.top_height(700) for _ in range(10)] == [b.top_height(700) for _ in range(10)]


def test_spawn_appends_at_right_edge():
    spawner = PipeSpawner(GameConfig(), random.Random(0))
    session = make_session()
    first = spawner.spawn(session, (480, 600))
    second = spawner.spawn(session, (480, 600))
    assert session.pipes == [first, second]
    assert first.x == 490
    assert first.gap == 150
    assert first.width == 60
    assert not first.scored


def test_spawn_after_interval_elapsed():
    spawner = PipeSpawner(GameConfig(), random.Random(0))
    session = make_session()
    session.last_pipe_time = 0

    assert spawner.maybe_spawn(session, 1000, (480, 600)) is None
    assert spawner.maybe_spawn(session, 1900, (480, 600)) is not None
    assert len(session.pipes) == 1
    assert session.last_pipe_time == 1900


def test_interval_is_strict_and_restarts_from_last_spawn():
    spawner = PipeSpawner(GameConfig(), random.Random(0))
    session = make_session()
    session.last_pipe_time = 500

    assert spawner.maybe_spawn(session, 2300, (480, 600)) is None
    assert spawner.maybe_spawn(session, 2301, (480, 600)) is not None
    # Next one is measured from 2301, not from a fixed schedule
    assert spawner.maybe_spawn(session, 4100, (480, 600)) is None
    assert spawner.maybe_spawn(session, 4102, (480, 600)) is not None
    assert len(session.pipes) == 2

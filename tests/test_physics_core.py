import math

import pytest

from skyflap.config import GameConfig
from skyflap.data_models import Bird, Pipe, Session
from skyflap.physics_core import PhysicsCore


def make_bird(x=120.0, y=300.0, vy=0.0):
    return Bird(x=x, y=y, w=38, h=28, vy=vy)


@pytest.fixture
def physics(config):
    return PhysicsCore(config)


class TestIntegrator:
    def test_gravity_then_position(self, physics):
        bird = make_bird(y=100.0)
        physics.apply_gravity_and_movement(bird)
        assert bird.vy == pytest.approx(0.45)
        assert bird.y == pytest.approx(100.45)

    def test_velocity_grows_by_gravity_every_tick(self, physics):
        bird = make_bird(vy=-7.5)
        previous = bird.vy
        for _ in range(30):
            physics.apply_gravity_and_movement(bird)
            assert bird.vy - previous == pytest.approx(0.45)
            previous = bird.vy

    @pytest.mark.parametrize("vy", [-20.0, -7.5, 0.0, 3.2, 25.0])
    def test_flap_is_a_hard_reset(self, physics, vy):
        bird = make_bird(vy=vy)
        physics.flap(bird)
        assert bird.vy == -7.5
        assert bird.flap_frame == 6

    def test_flap_pose_counts_down_to_zero(self, physics):
        bird = make_bird()
        physics.flap(bird)
        for expected in (5, 4, 3, 2, 1, 0, 0):
            physics.apply_gravity_and_movement(bird)
            assert bird.flap_frame == expected

    @pytest.mark.parametrize("vy, rotation", [(-20.0, -30.0), (-5.0, -15.0), (10.0, 30.0), (40.0, 70.0)])
    def test_rotation_follows_velocity_within_limits(self, vy, rotation):
        physics = PhysicsCore(GameConfig(gravity=0.0))
        bird = make_bird(vy=vy)
        physics.apply_gravity_and_movement(bird)
        assert bird.rotation == pytest.approx(rotation)

    def test_idle_sway(self, physics, config):
        session = Session.fresh(config, (480, 600))
        phase = physics.idle_sway(session.bird, 0.0, 600)
        assert phase == pytest.approx(0.04)
        assert session.bird.y == pytest.approx(240 + math.sin(0.04) * 12)
        assert session.bird.vy == 0.0

        phase = physics.idle_sway(session.bird, phase, 600)
        assert phase == pytest.approx(0.08)
        assert session.bird.y == pytest.approx(240 + math.sin(0.08) * 12)


class TestCollision:
    # 600 high viewport, 80 ground: groundline at 520

    def test_ground_contact_at_groundline(self, physics):
        assert physics.hits_ground(make_bird(y=520 - 14), 600)
        assert not physics.hits_ground(make_bird(y=520 - 14.5), 600)

    def test_ceiling_is_corrected_not_fatal(self, physics):
        bird = make_bird(y=5.0, vy=-6.0)
        assert physics.clamp_ceiling(bird)
        assert bird.y == 14.0
        assert bird.top == 0.0
        assert bird.vy == 0.0
        assert not physics.check_collision(make_bird(y=3.0, vy=-2.0), [], 600)

    def test_inside_gap_is_safe(self, physics):
        pipe = Pipe(x=100, top_h=100, width=60, gap=150)
        for y in (110, 175, 240):
            assert not physics.hits_pipe(make_bird(y=y), pipe)

    def test_margin_edges(self, physics):
        pipe = Pipe(x=100, top_h=100, width=60, gap=150)
        assert physics.hits_pipe(make_bird(y=109), pipe)
        assert physics.hits_pipe(make_bird(y=241), pipe)

    def test_no_horizontal_overlap(self, physics):
        pipe = Pipe(x=100, top_h=100, width=60, gap=150)
        assert not physics.hits_pipe(make_bird(x=85, y=50), pipe)
        assert physics.hits_pipe(make_bird(x=86, y=50), pipe)
        # Past the right edge: left + margin must be < 160
        assert not physics.hits_pipe(make_bird(x=175, y=50), pipe)
        assert physics.hits_pipe(make_bird(x=174, y=50), pipe)

    def test_any_pipe_is_enough(self, physics):
        safe = Pipe(x=100, top_h=100, width=60, gap=150)
        deadly = Pipe(x=100, top_h=300, width=60, gap=150)
        assert physics.check_collision(make_bird(y=175), [safe, deadly], 600)

    def test_ground_beats_ceiling_and_pipes(self, physics):
        bird = make_bird(y=515.0, vy=3.0)
        assert physics.check_collision(bird, [], 600)
        assert bird.y == 515.0

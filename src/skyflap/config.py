"""
config.py: Tunable game configuration, defaulting to the values in constants.py.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class GameConfig:
    """Every tunable the simulation reads. Override fields for tests or the CLI."""
    gravity: float = C.GRAVITY
    jump_velocity: float = C.JUMP_VELOCITY
    pitch_scale: float = C.PITCH_SCALE
    min_rotation: float = C.MIN_ROTATION
    max_rotation: float = C.MAX_ROTATION
    flap_pose_frames: int = C.FLAP_POSE_FRAMES

    bird_width: float = C.BIRD_WIDTH
    bird_height: float = C.BIRD_HEIGHT
    bird_x_ratio: float = C.BIRD_X_RATIO
    bird_y_ratio: float = C.BIRD_Y_RATIO

    idle_phase_step: float = C.IDLE_PHASE_STEP
    idle_amplitude: float = C.IDLE_AMPLITUDE

    pipe_width: float = C.PIPE_WIDTH
    pipe_gap: float = C.PIPE_GAP
    pipe_speed: float = C.PIPE_SPEED
    pipe_spawn_interval: float = C.PIPE_SPAWN_INTERVAL
    pipe_spawn_margin: float = C.PIPE_SPAWN_MARGIN
    pipe_overscan: float = C.PIPE_OVERSCAN
    pipe_expire_slack: float = C.PIPE_EXPIRE_SLACK

    ground_height: float = C.GROUND_HEIGHT
    collision_margin: float = C.COLLISION_MARGIN
    parallax_factor: float = C.PARALLAX_FACTOR
    bg_tile: float = C.BG_TILE

    best_score_key: str = C.BEST_SCORE_KEY

    def groundline(self, viewport_height: float) -> float:
        """Y coordinate of the top of the ground strip."""
        return viewport_height - self.ground_height

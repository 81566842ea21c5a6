"""
physics_core.py: Deterministic per-frame kinematics and collision logic.
"""

import math
from typing import Iterable

from .config import GameConfig
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Integrator and collision detector for the bird.

    All units are per frame: the simulation advances one fixed step per
    display refresh regardless of the elapsed wall-clock time.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    # -------- Integrator --------

    def apply_gravity_and_movement(self, bird: Bird) -> None:
        """Advances velocity, position, tilt and the flap pose by one frame."""
        cfg = self.config
        bird.vy += cfg.gravity
        bird.y += bird.vy
        bird.rotation = min(max(bird.vy * cfg.pitch_scale, cfg.min_rotation), cfg.max_rotation)
        if bird.flap_frame > 0:
            bird.flap_frame -= 1

    def flap(self, bird: Bird, pose: bool = True) -> None:
        """Resets vertical velocity to the jump constant."""
        bird.vy = self.config.jump_velocity
        if pose:
            bird.flap_frame = self.config.flap_pose_frames

    def idle_sway(self, bird: Bird, phase: float, viewport_height: float) -> float:
        """Bobs the bird around its baseline before the first flap. Returns the advanced phase."""
        cfg = self.config
        phase += cfg.idle_phase_step
        baseline = viewport_height * cfg.bird_y_ratio
        bird.y = baseline + math.sin(phase) * cfg.idle_amplitude
        return phase

    # -------- Collision --------

    def hits_ground(self, bird: Bird, viewport_height: float) -> bool:
        return bird.bottom >= self.config.groundline(viewport_height)

    def clamp_ceiling(self, bird: Bird) -> bool:
        """Pins the bird under the ceiling. Returns True if a correction was made."""
        if bird.top < 0:
            bird.y = bird.h / 2
            bird.vy = 0.0
            return True
        return False

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        """Shrunk-box test so that grazing a pipe edge is forgiven."""
        m = self.config.collision_margin
        if bird.right - m > pipe.x and bird.left + m < pipe.right:
            return bird.top + m < pipe.top_h or bird.bottom - m > pipe.gap_bottom
        return False

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe], viewport_height: float) -> bool:
        """
        Runs ground, ceiling and pipe checks in that order.
        Returns True on a run-ending contact; ceiling contact is corrected in place.
        """
        # 1. Ground
        if self.hits_ground(bird, viewport_height):
            return True

        # 2. Ceiling
        self.clamp_ceiling(bird)

        # 3. Pipes, first contact wins
        return any(self.hits_pipe(bird, pipe) for pipe in pipes)

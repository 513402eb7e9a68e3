"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable

from .constants import (
    GRAVITY, JUMP_STRENGTH, SCREEN_HEIGHT, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Per-frame physics and collision shared by the game engine.
    All units are pixels and frames.
    """

    GRAVITY = GRAVITY
    JUMP_STRENGTH = JUMP_STRENGTH
    SCREEN_HEIGHT = SCREEN_HEIGHT

    def jump(self) -> float:
        """Returns the velocity after a jump."""
        return self.JUMP_STRENGTH

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates new position and velocity after one frame."""
        velocity += self.GRAVITY
        y += velocity
        return y, velocity

    def step_bird(self, bird: Bird, jump: bool):
        """
        Advances the bird by one frame. A jump overwrites the velocity before
        gravity is added, so holding the key pins it instead of accelerating.
        """
        if jump:
            bird.velocity = self.jump()
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

    def is_out_of_bounds(self, bird: Bird) -> bool:
        return bird.y > self.SCREEN_HEIGHT - BIRD_SIZE or bird.y < 0

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        """Tests the bird against the top and bottom stubs of one pipe."""
        if not (bird.x + BIRD_SIZE > pipe.x and bird.x < pipe.x + PIPE_WIDTH):
            return False
        return bird.y < pipe.gap_y or bird.y + BIRD_SIZE > pipe.gap_y + PIPE_GAP

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""
        if self.is_out_of_bounds(bird):
            return True
        return any(self.hits_pipe(bird, pipe) for pipe in pipes)

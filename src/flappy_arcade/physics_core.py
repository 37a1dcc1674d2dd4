"""
physics_core.py: Frame-stepped bird kinematics and pipe collision logic.

Gravity and jump velocity are expressed per frame, not per second, so the
feel depends on the client running at RENDER_FPS.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .data_models import Bird, Box, GameConfig, Pipe


@dataclass
class PhysicsCore:
    """
    Shared bird physics used by the game engine and its managers.
    """
    config: GameConfig = field(default_factory=GameConfig)

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Calculates new velocity and position after one frame (explicit Euler).
        """
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def clamp(self, y: float, velocity: float) -> Tuple[float, float]:
        """Keeps y inside [0, bird_floor]; hitting either bound stops the bird."""
        if y <= 0:
            return 0.0, 0.0
        floor = self.config.bird_floor
        if y >= floor:
            return floor, 0.0
        return y, velocity

    def is_on_ground(self, bird: Bird) -> bool:
        return bird.y + bird.height >= self.config.ground_line

    def advance_bird(self, bird: Bird) -> bool:
        """
        Steps the bird one frame. Returns True once it rests on the ground.
        """
        y, velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        bird.y, bird.velocity = self.clamp(y, velocity)
        return self.is_on_ground(bird)

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.jump_velocity

    def pipe_boxes(self, pipe: Pipe) -> Tuple[Box, Box]:
        """The solid parts of a pipe: above the gap and below it down to the ground."""
        left = pipe.x
        right = pipe.x + self.config.pipe_width
        upper = Box(left, 0, right, pipe.gap_y)
        lower = Box(left, pipe.gap_y + self.config.pipe_gap, right, self.config.ground_line)
        return upper, lower

    def check_collision(self, box: Box, pipes: Iterable[Pipe]) -> bool:
        """Checks the box against every pipe at its current position."""
        for pipe in pipes:
            if any(boxes_touch(box, part) for part in self.pipe_boxes(pipe)):
                return True
        return False


def boxes_touch(a: Box, b: Box) -> bool:
    """Inclusive overlap: shared edges count. Zero-height boxes never touch."""
    if b.bottom <= b.top or a.bottom <= a.top:
        return False
    return (a.left <= b.right and b.left <= a.right
            and a.top <= b.bottom and b.top <= a.bottom)

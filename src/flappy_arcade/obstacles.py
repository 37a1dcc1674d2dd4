"""
obstacles.py: Spawning, scrolling, scoring and pruning of pipes.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .data_models import Box, Pipe, SessionState
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class PipeManager:
    """
    Owns the pipe rules; the pipes themselves live in the SessionState.
    """
    core: PhysicsCore = field(default_factory=PhysicsCore)
    rng: random.Random = field(default_factory=random.Random)

    def spawn(self, pipes: List[Pipe]) -> Pipe:
        """Appends a new pipe at the right edge with a random gap offset."""
        config = self.core.config
        gap_y = self.rng.randrange(config.max_gap_offset)
        pipe = Pipe(x=float(config.screen_width), gap_y=gap_y)
        pipes.append(pipe)
        logger.debug("Spawned pipe gap_y=%d (%d on screen)", gap_y, len(pipes))
        return pipe

    def advance_and_collide(self, state: SessionState, bird_box: Box) -> bool:
        """
        Moves every pipe once, in spawn order, scoring and colliding each.
        Pipes that left the screen are dropped after their checks ran.
        """
        config = self.core.config
        survivors = []
        collided = False

        for pipe in state.pipes:
            pipe.x -= config.pipe_speed
            trailing_edge = pipe.x + config.pipe_width

            if trailing_edge < bird_box.left and not pipe.scored:
                pipe.scored = True
                state.score += 1

            if self.core.check_collision(bird_box, [pipe]):
                collided = True

            if trailing_edge >= 0:
                survivors.append(pipe)

        state.pipes = survivors
        return collided

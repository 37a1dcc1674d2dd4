"""
game_engine.py: The per-frame simulation loop for a single player session.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .data_models import Bird, SessionState
from .obstacles import PipeManager
from .physics_core import PhysicsCore
from .scenery import CloudManager
from .scheduler import FrameQueue

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Drives one session: clouds, bird, pipes, then the next frame request.
    Inherits bird physics from PhysicsCore.

    All mutation happens inside tick() and activate(), which the client
    calls from a single thread.
    """
    scheduler: FrameQueue = field(default_factory=FrameQueue)
    rng: random.Random = field(default_factory=random.Random)
    state: Optional[SessionState] = None
    best_score: int = 0

    def __post_init__(self):
        self.pipe_manager = PipeManager(core=self, rng=self.rng)
        self.cloud_manager = CloudManager(config=self.config, rng=self.rng)

    @property
    def running(self) -> bool:
        return self.state is not None and not self.state.ended

    def start(self):
        """Begins the first session."""
        logger.info("Starting session (%dx%d)", self.config.screen_width, self.config.screen_height)
        self.reset()

    def reset(self):
        """
        Replaces the session with a fresh one, gives the bird its opening flap
        and schedules the first tick. Safe to call at any time.
        """
        self.state = SessionState(
            bird=Bird.from_config(self.config),
            clouds=self.cloud_manager.spawn_batch(self.config.cloud_count),
        )
        self.state.bird.velocity = self.flap()
        self.scheduler.request_frame(self.tick)

    def activate(self):
        """Input signal: flap while running, restart once the session ended."""
        if self.state is None:
            self.start()
        elif self.state.ended:
            logger.info("Restarting after game over (best=%d)", self.best_score)
            self.reset()
        else:
            self.state.bird.velocity = self.flap()

    def tick(self):
        """Advances the session by one frame."""
        state = self.state
        if state is None:
            raise RuntimeError("tick() called before start()")
        if state.ended:
            return

        self.cloud_manager.advance(state.clouds)
        grounded = self.advance_bird(state.bird)
        collided = self.pipe_manager.advance_and_collide(state, state.bird.box())

        state.tick_count += 1
        if state.tick_count % self.config.pipe_spawn_interval == 0:
            self.pipe_manager.spawn(state.pipes)

        if grounded or collided:
            self._end_session(reason="ground" if grounded else "pipe")
            return

        self.scheduler.request_frame(self.tick)

    def _end_session(self, reason: str):
        state = self.state
        state.ended = True
        state.bird.velocity = 0.0
        state.final_score = state.score
        self.best_score = max(self.best_score, state.score)
        logger.info("Game over (%s): %s", reason, state.summary())

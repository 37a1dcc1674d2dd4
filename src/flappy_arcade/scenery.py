"""
scenery.py: Background clouds. Cosmetic only, never collide with anything.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .data_models import Cloud, GameConfig


@dataclass
class CloudManager:
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)

    def _random_y(self) -> float:
        return self.rng.random() * (self.config.screen_height / 2)

    def spawn_batch(self, count: int) -> List[Cloud]:
        """Clouds start off-screen to the right, staggered by up to one screen width."""
        width = self.config.screen_width
        return [
            Cloud(x=self.rng.random() * width + width, y=self._random_y(),
                  width=self.config.cloud_width, height=self.config.cloud_height)
            for _ in range(count)
        ]

    def advance(self, clouds: List[Cloud]):
        """Scrolls clouds left and recycles the ones that left the screen."""
        for cloud in clouds:
            cloud.x -= self.config.cloud_speed
            if cloud.x + cloud.width < 0:
                cloud.x = float(self.config.screen_width)
                cloud.y = self._random_y()

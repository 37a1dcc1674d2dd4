"""
assets.py: Image resources with a readiness flag, so drawing can fall back to
plain shapes when art is missing.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pygame

from .constants import BIRD_IMAGE, CLOUD_IMAGE, GROUND_IMAGE

logger = logging.getLogger(__name__)


@dataclass
class Sprite:
    """An image that may or may not have loaded."""
    name: str
    surface: Optional[pygame.Surface] = None
    _scaled: Dict[Tuple[int, int], pygame.Surface] = field(default_factory=dict, init=False, repr=False)

    @property
    def ready(self) -> bool:
        return self.surface is not None and self.surface.get_height() != 0

    @property
    def natural_size(self) -> Tuple[int, int]:
        if self.surface is None:
            return (0, 0)
        return self.surface.get_size()

    def scaled(self, width: int, height: int) -> pygame.Surface:
        """The image stretched to (width, height); cached per size."""
        if not self.ready:
            raise ValueError(f"sprite {self.name!r} is not loaded")
        size = (int(width), int(height))
        if size not in self._scaled:
            self._scaled[size] = pygame.transform.scale(self.surface, size)
        return self._scaled[size]


def load_sprite(path: Union[str, Path]) -> Sprite:
    """Loads an image; a missing or broken file gives an unready Sprite."""
    path = Path(path)
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return Sprite(name=path.name)
    logger.debug("Loaded %s %s", path, surface.get_size())
    return Sprite(name=path.name, surface=surface)


@dataclass
class AssetBundle:
    """The three images the game draws."""
    bird: Sprite
    ground: Sprite
    cloud: Sprite

    @classmethod
    def load(cls, directory: Union[str, Path]) -> "AssetBundle":
        directory = Path(directory)
        return cls(
            bird=load_sprite(directory / BIRD_IMAGE),
            ground=load_sprite(directory / GROUND_IMAGE),
            cloud=load_sprite(directory / CLOUD_IMAGE),
        )

    @classmethod
    def empty(cls) -> "AssetBundle":
        return cls(bird=Sprite(BIRD_IMAGE), ground=Sprite(GROUND_IMAGE), cloud=Sprite(CLOUD_IMAGE))

    @property
    def all_ready(self) -> bool:
        return self.bird.ready and self.ground.ready and self.cloud.ready

    def missing(self):
        return [s.name for s in (self.bird, self.ground, self.cloud) if not s.ready]

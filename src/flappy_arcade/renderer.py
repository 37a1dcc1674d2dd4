"""
renderer.py: Draws a SessionState onto a pygame surface.
"""

from typing import Optional

import pygame

from .assets import AssetBundle
from .constants import (
    SKY_COLOR, PIPE_COLOR, BIRD_FALLBACK_COLOR, GROUND_FALLBACK_COLOR,
    TEXT_COLOR, FONT_SIZE, SCORE_POS, GAME_OVER_TEXT, GAME_OVER_X,
)
from .data_models import GameConfig, SessionState
from .physics_core import PhysicsCore


class Renderer:
    def __init__(self, surface: pygame.Surface, assets: AssetBundle,
                 config: Optional[GameConfig] = None):
        self.surface = surface
        self.assets = assets
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config)
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, FONT_SIZE)

    def draw(self, state: SessionState):
        """Renders one frame, back to front."""
        config = self.config
        screen = self.surface

        screen.fill((0, 0, 0))
        pygame.draw.rect(screen, SKY_COLOR, (0, 0, config.screen_width, config.screen_height))

        # Clouds only once their image is loaded
        if self.assets.cloud.ready:
            for cloud in state.clouds:
                image = self.assets.cloud.scaled(cloud.width, cloud.height)
                screen.blit(image, (int(cloud.x), int(cloud.y)))

        ground_rect = (0, config.ground_line, config.screen_width, config.ground_height)
        if self.assets.ground.ready:
            screen.blit(self.assets.ground.scaled(config.screen_width, config.ground_height),
                        ground_rect[:2])
        else:
            pygame.draw.rect(screen, GROUND_FALLBACK_COLOR, ground_rect)

        bird = state.bird
        if self.assets.bird.ready:
            screen.blit(self.assets.bird.scaled(bird.width, bird.height), (int(bird.x), int(bird.y)))
        else:
            pygame.draw.rect(screen, BIRD_FALLBACK_COLOR,
                             (int(bird.x), int(bird.y), bird.width, bird.height))

        for pipe in state.pipes:
            for part in self.core.pipe_boxes(pipe):
                height = int(part.bottom - part.top)
                if height > 0:
                    pygame.draw.rect(screen, PIPE_COLOR,
                                     (int(part.left), int(part.top), config.pipe_width, height))

        self._text(f"Score: {state.score}", SCORE_POS)

        if state.ended:
            self._text(GAME_OVER_TEXT, (GAME_OVER_X, config.screen_height // 2))

    def _text(self, text: str, baseline_pos):
        # Positions are text baselines
        surf = self.font.render(text, True, TEXT_COLOR)
        x, y = baseline_pos
        self.surface.blit(surf, (x, y - self.font.get_ascent()))

"""
client.py

pygame window that feeds input to the GameEngine, runs its pending tick once
per frame and renders the result.
"""

import logging
import random
from pathlib import Path
from typing import Optional, Union

import pygame

from .assets import AssetBundle
from .constants import RENDER_FPS, WINDOW_TITLE, DEFAULT_ASSET_DIR
from .data_models import GameConfig
from .game_engine import GameEngine
from .renderer import Renderer
from .scheduler import FrameQueue

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)
CLICK_BUTTONS = (1, 2, 3)


class FlappyClient:
    def __init__(self, asset_dir: Union[str, Path] = DEFAULT_ASSET_DIR,
                 config: Optional[GameConfig] = None, seed: Optional[int] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)

        # Loading is synchronous, so every sprite is settled before the loop starts
        self.assets = AssetBundle.load(asset_dir)
        if not self.assets.all_ready:
            logger.warning("Missing art %s, drawing placeholders", self.assets.missing())

        self.frames = FrameQueue()
        self.engine = GameEngine(config=self.config, scheduler=self.frames,
                                 rng=random.Random(seed))
        self.renderer = Renderer(self.screen, self.assets, self.config)
        self.clock = pygame.time.Clock()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Applies one pygame event. Returns False when the player quits."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in FLAP_KEYS:
                self.engine.activate()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Wheel scrolls also arrive as buttons 4 and 5
            if event.button in CLICK_BUTTONS:
                self.engine.activate()
        elif event.type == pygame.FINGERDOWN:
            self.engine.activate()
        return True

    def run(self, max_frames: Optional[int] = None):
        """The main client execution loop."""
        self.engine.start()
        logger.info("Client running at %d FPS", RENDER_FPS)

        frames = 0
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            # Input lands before this frame's tick
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.frames.run_pending()
            self.renderer.draw(self.engine.state)
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False

        logger.info("Client stopped. Best score: %d", self.engine.best_score)
        pygame.quit()

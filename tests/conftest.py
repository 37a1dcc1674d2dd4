import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_arcade.data_models import GameConfig
from flappy_arcade.game_engine import GameEngine
from flappy_arcade.scheduler import FrameQueue


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def still_config():
    """No gravity, no flap impulse, no spawns: the bird hovers at its start height."""
    return GameConfig(gravity=0.0, jump_velocity=0.0, pipe_spawn_interval=10_000)


@pytest.fixture
def frames():
    return FrameQueue()


@pytest.fixture
def engine(frames, rng):
    return GameEngine(scheduler=frames, rng=rng)

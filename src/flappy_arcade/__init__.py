"""Single-screen flappy bird game: a frame-stepped core plus a pygame client."""

from .data_models import GameConfig, Bird, Pipe, Cloud, SessionState
from .game_engine import GameEngine
from .scheduler import FrameQueue

__version__ = "0.1.0"

__all__ = ["GameConfig", "Bird", "Pipe", "Cloud", "SessionState", "GameEngine", "FrameQueue"]

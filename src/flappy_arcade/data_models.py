"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT,
    BIRD_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT,
    GRAVITY, JUMP_VELOCITY,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPAWN_INTERVAL_TICKS,
    CLOUD_COUNT, CLOUD_SPEED, CLOUD_WIDTH, CLOUD_HEIGHT,
)


@dataclass(frozen=True)
class GameConfig:
    """Tunables for one session. Defaults are the values in constants.py."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ground_height: int = GROUND_HEIGHT

    bird_x: float = BIRD_X
    bird_start_y: float = BIRD_START_Y
    bird_width: int = BIRD_WIDTH
    bird_height: int = BIRD_HEIGHT

    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY

    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_spawn_interval: int = PIPE_SPAWN_INTERVAL_TICKS

    cloud_count: int = CLOUD_COUNT
    cloud_speed: float = CLOUD_SPEED
    cloud_width: int = CLOUD_WIDTH
    cloud_height: int = CLOUD_HEIGHT

    def __post_init__(self):
        for name in ("screen_width", "screen_height", "bird_width", "bird_height",
                     "pipe_width", "pipe_gap", "pipe_speed", "pipe_spawn_interval",
                     "cloud_width", "cloud_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.ground_height < 0 or self.cloud_count < 0 or self.cloud_speed < 0:
            raise ValueError("ground_height, cloud_count and cloud_speed must not be negative")
        if self.max_gap_offset <= 0:
            raise ValueError(
                f"pipe_gap {self.pipe_gap} does not fit above the ground "
                f"({self.ground_line}px of playfield)")
        if self.bird_floor < 0:
            raise ValueError("bird does not fit above the ground")
        if not 0 <= self.bird_start_y <= self.bird_floor:
            raise ValueError(
                f"bird_start_y {self.bird_start_y} outside [0, {self.bird_floor}]")

    @property
    def ground_line(self) -> int:
        """Y coordinate of the top of the ground."""
        return self.screen_height - self.ground_height

    @property
    def bird_floor(self) -> float:
        """Lowest allowed bird y (top edge)."""
        return self.ground_line - self.bird_height

    @property
    def max_gap_offset(self) -> int:
        """Exclusive upper bound for a pipe's gap offset."""
        return self.ground_line - self.pipe_gap


class Box(NamedTuple):
    """Axis-aligned box; edges are inclusive for overlap tests."""
    left: float
    top: float
    right: float
    bottom: float


@dataclass
class Bird:
    """The player-controlled actor."""
    x: float = BIRD_X
    y: float = BIRD_START_Y
    velocity: float = 0.0
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT

    @classmethod
    def from_config(cls, config: GameConfig) -> "Bird":
        return cls(x=config.bird_x, y=config.bird_start_y,
                   width=config.bird_width, height=config.bird_height)

    def box(self) -> Box:
        return Box(self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass
class Pipe:
    """A pipe pair: solid above gap_y and below gap_y + gap."""
    x: float
    gap_y: int
    scored: bool = False


@dataclass
class Cloud:
    """A purely decorative background cloud."""
    x: float
    y: float
    width: int = CLOUD_WIDTH
    height: int = CLOUD_HEIGHT


@dataclass
class SessionState:
    """Everything that changes while a session runs."""
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    score: int = 0
    tick_count: int = 0
    ended: bool = False
    final_score: Optional[int] = None

    def summary(self):
        """Minimal state dictionary for logging."""
        return {
            "y": round(self.bird.y, 2),
            "v": round(self.bird.velocity, 2),
            "score": self.score,
            "tick": self.tick_count,
            "pipes": len(self.pipes),
            "ended": self.ended,
        }

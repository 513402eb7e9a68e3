"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import BIRD_START_X, BIRD_START_Y


class Mode(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Bird:
    """The player-controlled square."""
    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    velocity: float = 0.0


@dataclass
class Pipe:
    """An obstacle; the open gap spans [gap_y, gap_y + PIPE_GAP]."""
    x: float
    gap_y: float


@dataclass
class GameState:
    """Everything the simulation mutates between frames."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    spawn_timer: int = 0
    mode: Mode = Mode.PLAYING

    @property
    def game_over(self) -> bool:
        return self.mode is Mode.GAME_OVER

    def reset(self):
        """Starts a new round in place. The high score is kept."""
        self.bird = Bird()
        self.pipes = []
        self.score = 0
        self.spawn_timer = 0
        self.mode = Mode.PLAYING

"""
render.py: Turns a GameState into the ordered draw commands for one frame.
No graphics library is imported here; flappy_client paints the commands.
"""

from dataclasses import dataclass
from typing import List, Protocol, Tuple, Union

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP,
    SKY_COLOR, BIRD_COLOR, PIPE_COLOR
)
from .data_models import GameState

Color = Tuple[int, int, int]

GAME_OVER_MESSAGE = " | Game Over! Press Space to Restart"


@dataclass(frozen=True)
class FillBackground:
    color: Color


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass(frozen=True)
class DrawText:
    text: str


DrawCommand = Union[FillBackground, DrawRect, DrawText]


class JumpSource(Protocol):
    def is_jump_pressed(self) -> bool:
        ...


class DrawSink(Protocol):
    def draw(self, commands: List[DrawCommand]) -> None:
        ...


def layout(outside_width: int, outside_height: int) -> Tuple[int, int]:
    """The logical resolution is fixed whatever the host window size is."""
    return SCREEN_WIDTH, SCREEN_HEIGHT


def status_text(state: GameState) -> str:
    msg = f"Score: {state.score} | Best: {state.high_score}"
    if state.game_over:
        msg += GAME_OVER_MESSAGE
    return msg


def draw_commands(state: GameState) -> List[DrawCommand]:
    """Background, bird, two stubs per pipe, then the status line."""
    bird = state.bird
    commands: List[DrawCommand] = [
        FillBackground(SKY_COLOR),
        DrawRect(bird.x, bird.y, BIRD_SIZE, BIRD_SIZE, BIRD_COLOR),
    ]

    for pipe in state.pipes:
        bottom_y = pipe.gap_y + PIPE_GAP
        commands.append(DrawRect(pipe.x, 0, PIPE_WIDTH, pipe.gap_y, PIPE_COLOR))
        commands.append(DrawRect(pipe.x, bottom_y, PIPE_WIDTH, SCREEN_HEIGHT - bottom_y, PIPE_COLOR))

    commands.append(DrawText(status_text(state)))
    return commands

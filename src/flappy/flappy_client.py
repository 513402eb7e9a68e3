"""
flappy_client.py

Pygame window, keyboard polling and painting of draw commands.
The simulation itself lives in game_engine and never touches pygame.
"""

import logging
from typing import List, Optional

import pygame

from .constants import (
    DEFAULT_FPS, SCREEN_WIDTH, SCREEN_HEIGHT, TEXT_COLOR, WINDOW_TITLE
)
from .game_engine import GameEngine
from .render import (
    DrawCommand, DrawRect, DrawSink, DrawText, FillBackground, JumpSource,
    draw_commands, layout
)

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
TEXT_POS = (4, 4)


class PygameSink:
    """Paints draw commands onto a pygame Surface."""

    def __init__(self, surface: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self._font = font

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        return self._font

    def draw(self, commands: List[DrawCommand]):
        for cmd in commands:
            if isinstance(cmd, FillBackground):
                self.surface.fill(cmd.color)
            elif isinstance(cmd, DrawRect):
                rect = (int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h))
                pygame.draw.rect(self.surface, cmd.color, rect)
            elif isinstance(cmd, DrawText):
                text = self.font.render(cmd.text, True, TEXT_COLOR)
                self.surface.blit(text, TEXT_POS)
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")


class FlappyClient:
    """
    Owns the window and the frame loop: one update and one render per tick.
    Raises pygame.error if the display cannot be opened.
    """

    def __init__(self, engine: GameEngine, fps: int = DEFAULT_FPS,
                 jump_source: Optional[JumpSource] = None):
        pygame.init()
        self.window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        # Everything is drawn at the logical resolution and scaled on present
        self.canvas = pygame.Surface(layout(*self.window.get_size()))
        self.sink: DrawSink = PygameSink(self.canvas, pygame.font.Font(None, 24))
        # Keyboard by default; scripted sources can stand in for it
        self.jump_source: JumpSource = jump_source or self

        self.engine = engine
        self.state = engine.new_game()
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = False

    def is_jump_pressed(self) -> bool:
        """Level-sampled: true for every frame the key is held."""
        keys = pygame.key.get_pressed()
        return any(keys[k] for k in JUMP_KEYS)

    def run(self):
        """The main client execution loop."""
        logger.info(f"Client loop started at {self.fps} FPS.")
        self.running = True
        try:
            while self.running:
                self.clock.tick(self.fps)
                self._handle_events()
                if not self.running:
                    break

                self.engine.update(self.state, self.jump_source.is_jump_pressed())
                self.sink.draw(draw_commands(self.state))
                self._present()
        finally:
            pygame.quit()
        logger.info(f"Client stopped. Best score this session: {self.state.high_score}")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def _present(self):
        window = pygame.display.get_surface()
        if window.get_size() == self.canvas.get_size():
            window.blit(self.canvas, (0, 0))
        else:
            pygame.transform.scale(self.canvas, window.get_size(), window)
        pygame.display.flip()

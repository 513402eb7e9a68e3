"""
game_engine.py: The frame-by-frame world simulation and its state machine.
"""

import logging
import random
from dataclasses import dataclass, field

from .constants import (
    SCREEN_WIDTH, PIPE_WIDTH, PIPE_SPEED, PIPE_SPAWN_INTERVAL,
    PIPE_GAP_MIN, PIPE_GAP_RANGE
)
from .data_models import GameState, Mode, Pipe
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Drives a GameState forward one frame at a time.
    Inherits bird physics and collision from PhysicsCore.
    """
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def new_game(self) -> GameState:
        return GameState()

    def update(self, state: GameState, jump: bool):
        """
        The main simulation step. In GameOver only a jump does anything
        (it restarts); in Playing the full pipeline runs.
        """
        if state.mode is Mode.GAME_OVER:
            if jump:
                self.restart(state)
            return

        # 1. Bird physics
        self.step_bird(state.bird, jump)

        # 2. Spawn, move and recycle pipes
        self.step_pipes(state)

        # 3. Collisions against post-movement positions
        if self.check_collision(state.bird, state.pipes):
            state.mode = Mode.GAME_OVER
            logger.info(f"Game over. Score: {state.score}, best: {state.high_score}")

    def restart(self, state: GameState):
        state.reset()
        logger.info("Restarted.")

    def spawn_pipe(self, state: GameState) -> Pipe:
        """Adds a pipe at the right edge with a random gap height."""
        gap_y = float(self.rng.randrange(PIPE_GAP_RANGE) + PIPE_GAP_MIN)
        pipe = Pipe(x=float(SCREEN_WIDTH), gap_y=gap_y)
        state.pipes.append(pipe)
        logger.debug(f"Spawned pipe with gap at {gap_y}")
        return pipe

    def step_pipes(self, state: GameState) -> int:
        """
        Advances the spawn timer, moves every pipe left and drops the ones
        that left the screen. Each dropped pipe scores a point.
        Returns the number of pipes recycled this frame.
        """
        state.spawn_timer += 1
        if state.spawn_timer > PIPE_SPAWN_INTERVAL:
            state.spawn_timer = 0
            self.spawn_pipe(state)

        for pipe in state.pipes:
            pipe.x -= PIPE_SPEED

        survivors = [p for p in state.pipes if p.x + PIPE_WIDTH >= 0]
        recycled = len(state.pipes) - len(survivors)
        state.pipes = survivors

        for _ in range(recycled):
            state.score += 1
            if state.score > state.high_score:
                state.high_score = state.score
                logger.info(f"New high score: {state.high_score}")
        return recycled

#!/usr/bin/env python3
"""
main.py: Command line entry point. Parses options, sets up logging and runs
the pygame client.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

from .constants import DEFAULT_FPS
from .flappy_client import FlappyClient
from .game_engine import GameEngine

logger = logging.getLogger("flappy")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy", description="Single-screen Flappy Bird")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for pipe placement")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = GameEngine(rng=random.Random(args.seed))
    logger.info(f"Starting with seed={args.seed}, fps={args.fps}")

    try:
        client = FlappyClient(engine, fps=args.fps)
    except pygame.error as e:
        logger.critical(f"Could not start display: {e}")
        return 1

    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import random

import pygame
import pytest

from flappy import main as main_module


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])
    assert args.seed is None
    assert args.fps == 60
    assert args.log_level == "INFO"


def test_parser_options():
    args = main_module.build_parser().parse_args(["--seed", "7", "--fps", "30", "--log-level", "DEBUG"])
    assert args.seed == 7
    assert args.fps == 30
    assert args.log_level == "DEBUG"


def test_rejects_non_positive_fps():
    with pytest.raises(SystemExit) as exc:
        main_module.main(["--fps", "0"])
    assert exc.value.code == 2


def test_display_failure_exits_with_error(monkeypatch, caplog):
    def broken_client(*args, **kwargs):
        raise pygame.error("No available video device")

    monkeypatch.setattr(main_module, "FlappyClient", broken_client)
    assert main_module.main(["--seed", "1"]) == 1
    assert "No available video device" in caplog.text


def test_runs_client(monkeypatch):
    seen = {}

    class FakeClient:
        def __init__(self, engine, fps):
            seen["engine"] = engine
            seen["fps"] = fps

        def run(self):
            seen["ran"] = True

    monkeypatch.setattr(main_module, "FlappyClient", FakeClient)
    assert main_module.main(["--seed", "3", "--fps", "30"]) == 0
    assert seen["fps"] == 30
    assert seen["ran"]
    # seeded engines draw the same gap heights
    assert seen["engine"].rng.random() == random.Random(3).random()

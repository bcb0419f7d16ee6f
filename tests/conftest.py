from __future__ import annotations

import os

import pytest

from falling_blocks.game import GameConfig, GameEngine

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine(GameConfig(random_seed=1234))

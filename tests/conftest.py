from __future__ import annotations

import pytest

from falling_block_rl.game import FallingBlockGame, GameConfig, GameGrid

@pytest.fixture
def grid() -> GameGrid:
    return GameGrid()

@pytest.fixture
def game() -> FallingBlockGame:
    return FallingBlockGame(GameConfig(random_seed=1234))

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .grid import Block, GameGrid
from .pieces import Direction, MoveResult, Piece, cells, decode
from .rules import ScoringRules


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    NONE = 6
    PAUSE = 7


class GameOver(Exception):
    """No further play is possible: the stack reached the spawn row."""


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    fall_interval: int = 5
    max_episode_steps: int = 10000
    tick_ms: int = 100


class FallingBlockGame:
    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid()
        self.score = 0
        self.rows_cleared_total = 0
        self.paused = False
        self.game_over = False
        self.fall_counter = 0
        self.piece: Piece
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.rows_cleared_total = 0
        self.paused = False
        self.game_over = False
        self.fall_counter = 0
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        self.piece = Piece.spawn(self.grid, self.rng)

    def tick(self) -> None:
        """Advance the fall timer by one unit.

        Every `fall_interval` ticks the piece tries to move down. If it
        cannot, it lands and a new piece spawns. Raises `GameOver` when the
        piece cannot be locked in.
        """
        if self.game_over:
            raise GameOver()
        if self.paused:
            return
        self.fall_counter += 1
        if self.fall_counter < self.config.fall_interval:
            return
        if not self.piece.move_down().ok:
            self.land()
            self._spawn_piece()
        self.fall_counter = 0

    def land(self) -> int:
        """Write the active piece into the grid, clear full rows, score them."""
        if self.piece.row <= 0:
            self.game_over = True
            raise GameOver()
        mask = decode(self.piece.rotation)
        for r, c in cells(self.piece.rotation):
            self.grid[self.piece.row + r, self.piece.col + c] = Block(int(mask[r, c]), self.piece.color)
        rows = self.grid.clear_full_rows()
        self.rows_cleared_total += rows
        self.score += self.rules.score_for_rows(rows)
        self.piece.grid = self.grid.copy()
        return rows

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def move_left(self) -> MoveResult:
        if self.paused:
            return MoveResult.PAUSED
        return self.piece.move_horizontal(Direction.LEFT)

    def move_right(self) -> MoveResult:
        if self.paused:
            return MoveResult.PAUSED
        return self.piece.move_horizontal(Direction.RIGHT)

    def soft_drop(self) -> MoveResult:
        if self.paused:
            return MoveResult.PAUSED
        return self.piece.move_down()

    def hard_drop(self) -> None:
        if self.paused:
            return
        self.piece.hard_drop()

    def rotate_cw(self) -> MoveResult:
        if self.paused:
            return MoveResult.PAUSED
        return self.piece.rotate(Direction.RIGHT)

    def rotate_ccw(self) -> MoveResult:
        if self.paused:
            return MoveResult.PAUSED
        return self.piece.rotate(Direction.LEFT)

    def apply(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE_CW:
            self.rotate_cw()
        elif action == Action.ROTATE_CCW:
            self.rotate_ccw()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.PAUSE:
            self.toggle_pause()
        elif action == Action.NONE:
            pass

    def get_state(self) -> np.ndarray:
        # Overlay the falling piece as a negative kind on a copy of the grid
        state = self.grid.values.astype(np.int8)
        if not self.game_over:
            for y, x in self.piece.cells():
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    state[y, x] = -int(self.piece.kind)
        return state

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np


HEIGHT = 16
WIDTH = 10

Coordinate = Tuple[int, int]


class Color(IntEnum):
    BLUE = 1
    YELLOW = 2
    CYAN = 3
    WHITE = 4
    MAGENTA = 5
    RED = 6
    GREEN = 7


@dataclass(frozen=True)
class Block:
    value: int = 0
    color: Optional[Color] = None

    @property
    def empty(self) -> bool:
        return self.value == 0


class GameGrid:
    """Fixed 16x10 playing field, row 0 at the top.

    Cells are stored in two planes: `values` (0 empty, nonzero filled) and
    `colors` (0 for no color, otherwise a `Color` value). Indexing with
    ``grid[row, col]`` returns a `Block`.
    """

    def __init__(self) -> None:
        self.height = HEIGHT
        self.width = WIDTH
        self.values = np.zeros((self.height, self.width), dtype=np.uint8)
        self.colors = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.values.fill(0)
        self.colors.fill(0)

    def __getitem__(self, pos: Coordinate) -> Block:
        row, col = pos
        color = int(self.colors[row, col])
        return Block(int(self.values[row, col]), Color(color) if color else None)

    def __setitem__(self, pos: Coordinate, block: Block) -> None:
        row, col = pos
        self.values[row, col] = block.value
        self.colors[row, col] = int(block.color) if block.color is not None else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameGrid):
            return NotImplemented
        return np.array_equal(self.values, other.values) and np.array_equal(self.colors, other.colors)

    def is_occupied(self, row: int, col: int) -> bool:
        return self.values[row, col] != 0

    def row(self, index: int) -> List[Block]:
        return [self[index, col] for col in range(self.width)]

    def rows(self) -> Iterator[List[Block]]:
        for index in range(self.height):
            yield self.row(index)

    def fill_row(self, index: int, block: Block) -> None:
        for col in range(self.width):
            self[index, col] = block

    def clear_full_rows(self) -> int:
        """Clear every full row, top to bottom, and return how many were cleared.

        A row is full when its values sum to the grid width. Each full row is
        emptied and the rows above it (inclusive) rotate down by one, so the
        empty row ends up on top. Later rows in the same pass are checked
        against the already shifted grid.
        """
        cleared = 0
        for i in range(self.height):
            if int(self.values[i].sum()) != self.width:
                continue
            self.values[i] = 0
            self.colors[i] = 0
            self.values[: i + 1] = np.roll(self.values[: i + 1], 1, axis=0)
            self.colors[: i + 1] = np.roll(self.colors[: i + 1], 1, axis=0)
            cleared += 1
        return cleared

    def copy(self) -> "GameGrid":
        new_grid = GameGrid()
        new_grid.values = self.values.copy()
        new_grid.colors = self.colors.copy()
        return new_grid

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

import numpy as np

from .grid import HEIGHT, WIDTH, Color, Coordinate, GameGrid


class TetrominoType(IntEnum):
    O = 1
    I = 2
    S = 3
    Z = 4
    J = 5
    L = 6
    T = 7


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1


class MoveResult(Enum):
    OK = "ok"
    OUT_OF_BOUNDS = "out of bounds"
    COLLISION = "collision"
    PAUSED = "paused"

    @property
    def ok(self) -> bool:
        return self is MoveResult.OK


# 16-bit 4x4 masks, MSB first, row-major. Order defines the rotation cycle.
ROTATIONS: Dict[TetrominoType, Tuple[int, ...]] = {
    TetrominoType.O: (51,),
    TetrominoType.I: (8738, 240),
    TetrominoType.S: (54, 561),
    TetrominoType.Z: (99, 306),
    TetrominoType.J: (275, 71, 802, 113),
    TetrominoType.L: (547, 116, 785, 23),
    TetrominoType.T: (114, 305, 39, 562),
}

COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.O: Color.BLUE,
    TetrominoType.I: Color.YELLOW,
    TetrominoType.S: Color.CYAN,
    TetrominoType.Z: Color.WHITE,
    TetrominoType.J: Color.MAGENTA,
    TetrominoType.L: Color.RED,
    TetrominoType.T: Color.GREEN,
}

SPAWN_COL = WIDTH // 2 - 1


def color(kind: TetrominoType) -> Color:
    return COLORS[kind]


def rotations(kind: TetrominoType) -> Tuple[int, ...]:
    return ROTATIONS[kind]


def decode(encoding: int) -> np.ndarray:
    """Split a 16-bit rotation encoding into a 4x4 matrix of 0/1."""
    bits = [(encoding >> (15 - i)) & 1 for i in range(16)]
    return np.array(bits, dtype=np.uint8).reshape(4, 4)


def cells(encoding: int) -> List[Coordinate]:
    """Occupied (row, col) offsets of an encoding, row-major."""
    rows, cols = np.nonzero(decode(encoding))
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


@dataclass
class Piece:
    """The falling piece.

    Collision checks run against `grid`, a private copy of the board taken
    at spawn. The owner is responsible for refreshing it after row clears.
    """

    kind: TetrominoType
    rotation: int
    grid: GameGrid = field(repr=False, compare=False)
    row: int = 0
    col: int = SPAWN_COL
    color: Color = field(init=False)

    def __post_init__(self) -> None:
        assert self.rotation in ROTATIONS[self.kind], f"{self.rotation} is not a rotation of {self.kind.name}"
        self.color = COLORS[self.kind]

    @classmethod
    def spawn(cls, grid: GameGrid, rng: random.Random) -> "Piece":
        kind = rng.choice(list(TetrominoType))
        rotation = rng.choice(ROTATIONS[kind])
        return cls(kind=kind, rotation=rotation, grid=grid.copy())

    @property
    def anchor(self) -> Coordinate:
        return self.row, self.col

    def cells(self) -> List[Coordinate]:
        return [(self.row + r, self.col + c) for r, c in cells(self.rotation)]

    def _check(self, rotation: int, d_row: int = 0, d_col: int = 0) -> MoveResult:
        targets = [(self.row + r + d_row, self.col + c + d_col) for r, c in cells(rotation)]
        for row, col in targets:
            if not 0 <= col < WIDTH or not 0 <= row < HEIGHT:
                return MoveResult.OUT_OF_BOUNDS
        for row, col in targets:
            if self.grid.is_occupied(row, col):
                return MoveResult.COLLISION
        return MoveResult.OK

    def move_horizontal(self, direction: Direction) -> MoveResult:
        result = self._check(self.rotation, d_col=int(direction))
        if result.ok:
            self.col += int(direction)
        return result

    def move_down(self) -> MoveResult:
        result = self._check(self.rotation, d_row=1)
        if result.ok:
            self.row += 1
        return result

    def hard_drop(self) -> None:
        while self.move_down().ok:
            continue

    def rotate(self, direction: Direction) -> MoveResult:
        options = ROTATIONS[self.kind]
        index = options.index(self.rotation)
        candidate = options[(index + int(direction)) % len(options)]
        result = self._check(candidate)
        if result.ok:
            self.rotation = candidate
        return result

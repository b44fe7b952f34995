"""Game module for Falling Block RL.

Exports the rules engine and supporting classes:
- GameGrid, Block, Color: 16x10 playing field and row clearing
- Piece, TetrominoType: falling piece with bitmask rotations
- ScoringRules: points awarded per cleared row
- FallingBlockGame: fall/land/spawn loop and player commands
- GameOver: raised when no further play is possible
"""

from .grid import HEIGHT, WIDTH, Block, Color, GameGrid
from .pieces import Direction, MoveResult, Piece, TetrominoType, cells, color, decode, rotations
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, GameOver

__all__ = [
    "HEIGHT",
    "WIDTH",
    "Block",
    "Color",
    "GameGrid",
    "Direction",
    "MoveResult",
    "Piece",
    "TetrominoType",
    "cells",
    "color",
    "decode",
    "rotations",
    "ScoringRules",
    "Action",
    "FallingBlockGame",
    "GameConfig",
    "GameOver",
]

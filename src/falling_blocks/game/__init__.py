"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and line clearing
- Piece, Block: Tetromino piece and its cells, with rotation about a pivot
- TetrominoType: Enum of available piece types
- PieceFactory: Uniform random piece source
- ScoringRules: Points awarded per lines cleared
- Key, InputSource, HeldKeys: Logical keys and held-key queries
- GameEngine: Timed update cycle and state management
"""

from .grid import GameGrid
from .pieces import Block, Piece, PieceFactory, TetrominoType
from .rules import ScoringRules
from .controls import HeldKeys, InputSource, Key
from .core import (
    DROP_INTERVAL_MS,
    GRID_HEIGHT,
    GRID_WIDTH,
    MOVE_INTERVAL_MS,
    GameConfig,
    GameEngine,
    GameSnapshot,
)

__all__ = [
    "GameGrid",
    "Block",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "ScoringRules",
    "Key",
    "InputSource",
    "HeldKeys",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "MOVE_INTERVAL_MS",
    "DROP_INTERVAL_MS",
]

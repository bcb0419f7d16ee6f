from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple


class TetrominoType(IntEnum):
    I = 1
    O = 2
    L = 3
    J = 4
    T = 5
    S = 6
    Z = 7


Coordinate = Tuple[int, int]


# Spawn cells, anchored at row 0 near the horizontal centre of a 10-wide grid.
# The second cell of each shape is the rotation pivot.
SPAWN_CELLS: Dict[TetrominoType, Tuple[Coordinate, ...]] = {
    TetrominoType.I: ((3, 0), (4, 0), (5, 0), (6, 0)),
    TetrominoType.O: ((4, 0), (5, 0), (4, 1), (5, 1)),
    TetrominoType.L: ((3, 0), (3, 1), (4, 1), (5, 1)),
    TetrominoType.J: ((5, 0), (3, 1), (4, 1), (5, 1)),
    TetrominoType.T: ((4, 0), (3, 1), (4, 1), (5, 1)),
    TetrominoType.S: ((4, 0), (5, 0), (3, 1), (4, 1)),
    TetrominoType.Z: ((3, 0), (4, 0), (4, 1), (5, 1)),
}

BLOCKS_PER_PIECE = 4


def spawn_extent() -> Tuple[int, int]:
    """Smallest (width, height) grid that holds every spawn cell."""
    cells = [cell for shape in SPAWN_CELLS.values() for cell in shape]
    return max(x for x, _ in cells) + 1, max(y for _, y in cells) + 1


@dataclass(frozen=True)
class Block:
    x: int
    y: int
    color: int

    def moved(self, dx: int, dy: int) -> "Block":
        return Block(self.x + dx, self.y + dy, self.color)


@dataclass
class Piece:
    """The falling tetromino: a shape type and its four blocks.

    ``color`` of every block is the shape's tag, ``int(kind)``; the grid stores
    that tag when the piece locks.
    """

    kind: TetrominoType
    blocks: List[Block]

    def __post_init__(self) -> None:
        if len(self.blocks) != BLOCKS_PER_PIECE:
            raise ValueError(
                f"a piece needs exactly {BLOCKS_PER_PIECE} blocks, got {len(self.blocks)}"
            )

    @classmethod
    def spawn(cls, kind: TetrominoType) -> "Piece":
        color = int(kind)
        return cls(kind, [Block(x, y, color) for x, y in SPAWN_CELLS[kind]])

    @classmethod
    def from_cells(cls, kind: TetrominoType, cells: Sequence[Coordinate]) -> "Piece":
        color = int(kind)
        return cls(kind, [Block(x, y, color) for x, y in cells])

    @property
    def rotates(self) -> bool:
        return self.kind != TetrominoType.O

    def cells(self) -> List[Coordinate]:
        return [(b.x, b.y) for b in self.blocks]

    def translated(self, dx: int, dy: int) -> List[Block]:
        return [b.moved(dx, dy) for b in self.blocks]

    def rotated(self) -> List[Block]:
        """Blocks turned 90 degrees clockwise around the pivot (block 1).

        With y growing downward, offset (dx, dy) becomes (-dy, dx).
        """
        pivot = self.blocks[1]
        rotated: List[Block] = []
        for b in self.blocks:
            dx = b.x - pivot.x
            dy = b.y - pivot.y
            rotated.append(Block(pivot.x - dy, pivot.y + dx, b.color))
        return rotated


class PieceFactory:
    """Uniform random draw over the seven shapes."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random(seed)

    def create_random_piece(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return Piece.spawn(kind)

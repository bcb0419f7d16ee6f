from __future__ import annotations

from falling_blocks.game import GameEngine, Piece, TetrominoType


def install(engine: GameEngine, kind: TetrominoType, cells) -> Piece:
    """Replace the active piece with one at the given cells."""
    engine.piece = Piece.from_cells(kind, cells)
    return engine.piece


def fill_row(engine: GameEngine, y: int, skip=(), color: int = 1) -> None:
    for x in range(engine.grid.width):
        if x not in skip:
            engine.grid.set_cell(x, y, color)

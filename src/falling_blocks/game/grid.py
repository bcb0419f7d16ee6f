from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


def occupied_cells(grid: np.ndarray) -> Iterator[Tuple[int, int, int]]:
    """Yield (x, y, color) for every filled cell, row by row."""
    ys, xs = np.nonzero(grid)
    for y, x in zip(ys, xs):
        yield int(x), int(y), int(grid[y, x])


class GameGrid:
    """Fixed-size 2D grid of locked cells.

    The grid uses 0 for empty cells and a piece's colour tag for filled cells.
    Rows are indexed from the top, so ``grid[y, x]``. Cells above the grid
    (``y < 0``) are never stored but count as free for a falling piece.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def is_free(self, x: int, y: int) -> bool:
        """True when a falling block may occupy (x, y)."""
        if x < 0 or x >= self.width or y >= self.height:
            return False
        if y >= 0 and self.grid[y, x] != EMPTY:
            return False
        return True

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if not self.is_free(x, y):
                return False
        return True

    def set_cell(self, x: int, y: int, color: int) -> None:
        self.grid[y, x] = color

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != EMPTY))

    def collapse_row(self, y: int) -> None:
        """Drop every row above ``y`` by one and blank the top row."""
        self.grid[1 : y + 1] = self.grid[:y].copy()
        self.grid[0] = EMPTY

    def clear_full_lines(self) -> int:
        """Remove complete rows bottom-up and return how many went.

        The pointer only moves up past an incomplete row, so after a collapse
        the row that slid into ``y`` is examined again.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                cleared += 1
                self.collapse_row(y)
            else:
                y -= 1
        return cleared

    def occupied_cells(self) -> Iterator[Tuple[int, int, int]]:
        return occupied_cells(self.grid)

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

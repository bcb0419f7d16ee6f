from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from .controls import InputSource, Key
from .grid import GameGrid, occupied_cells
from .pieces import Block, Piece, PieceFactory, spawn_extent
from .rules import ScoringRules


logger = logging.getLogger(__name__)

GRID_WIDTH = 10
GRID_HEIGHT = 20
MOVE_INTERVAL_MS = 100  # gates left/right, soft drop and rotation
DROP_INTERVAL_MS = 500


@dataclass
class GameConfig:
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    move_interval_ms: int = MOVE_INTERVAL_MS
    drop_interval_ms: int = DROP_INTERVAL_MS
    random_seed: Optional[int] = None


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of the engine handed to the renderer each frame."""

    piece: Tuple[Block, ...]
    grid: np.ndarray
    score: int
    game_over: bool

    def occupied_cells(self) -> Iterator[Tuple[int, int, int]]:
        return occupied_cells(self.grid)


class GameEngine:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        factory: Optional[PieceFactory] = None,
    ) -> None:
        self.config = config or GameConfig()
        min_width, min_height = spawn_extent()
        if self.config.width < min_width or self.config.height < min_height:
            raise ValueError(
                f"grid {self.config.width}x{self.config.height} cannot hold the spawn area "
                f"{min_width}x{min_height}"
            )
        self.rules = rules or ScoringRules()
        self.factory = factory or PieceFactory(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.game_over = False
        self.last_move_time = 0
        self.last_drop_time = 0
        self.last_rotate_time = 0
        self.piece = self._spawn_piece()

    def _spawn_piece(self) -> Piece:
        piece = self.factory.create_random_piece()
        logger.debug("spawned %s at %s", piece.kind.name, piece.cells())
        return piece

    def move_piece(self, dx: int, dy: int) -> bool:
        """Translate the active piece, locking it if a downward move is blocked.

        Returns True when the piece moved. A blocked move with ``dy > 0`` locks
        the piece in place; any other blocked move is dropped silently.
        """
        if self.game_over:
            return False
        candidate = self.piece.translated(dx, dy)
        if self.grid.can_place((b.x, b.y) for b in candidate):
            self.piece.blocks = candidate
            return True
        if dy > 0:
            self.lock_piece()
        return False

    def rotate_piece(self) -> bool:
        if self.game_over or not self.piece.rotates:
            return False
        candidate = self.piece.rotated()
        if not self.grid.can_place((b.x, b.y) for b in candidate):
            return False
        self.piece.blocks = candidate
        return True

    def lock_piece(self) -> int:
        """Commit the active piece to the grid and bring in the next one.

        A block still above the grid ends the game; blocks written before it
        stay, and neither line clearing nor spawning happens.
        """
        for block in self.piece.blocks:
            if block.y < 0:
                self.game_over = True
                logger.info("game over, final score %d", self.score)
                return 0
            self.grid.set_cell(block.x, block.y, block.color)
        logger.debug("locked %s at %s", self.piece.kind.name, self.piece.cells())
        lines = self.clear_lines()
        self.piece = self._spawn_piece()
        return lines

    def clear_lines(self) -> int:
        lines = self.grid.clear_full_lines()
        if lines:
            self.score += self.rules.score_for_lines(lines)
            logger.debug("cleared %d line(s), score %d", lines, self.score)
        return lines

    def update(self, now: int, keys: InputSource) -> None:
        """Advance one frame at ``now`` milliseconds with the currently held keys.

        Horizontal moves and soft drop share one gate, rotation has its own,
        and gravity has a third; firing one never resets another.
        """
        if self.game_over:
            return
        cfg = self.config

        if now - self.last_move_time >= cfg.move_interval_ms:
            if keys.is_held(Key.LEFT):
                self.move_piece(-1, 0)
                self.last_move_time = now
            if keys.is_held(Key.RIGHT):
                self.move_piece(1, 0)
                self.last_move_time = now

        if keys.is_held(Key.DOWN):
            if now - self.last_move_time >= cfg.move_interval_ms:
                self.move_piece(0, 1)
                self.last_move_time = now

        if keys.is_held(Key.UP):
            if now - self.last_rotate_time >= cfg.move_interval_ms:
                self.rotate_piece()
                self.last_rotate_time = now

        if now - self.last_drop_time >= cfg.drop_interval_ms:
            self.move_piece(0, 1)
            self.last_drop_time = now

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            piece=tuple(self.piece.blocks),
            grid=self.grid.clone_state(),
            score=self.score,
            game_over=self.game_over,
        )

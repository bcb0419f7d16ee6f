from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks.game import GRID_HEIGHT, GRID_WIDTH, GameSnapshot, TetrominoType


BACKGROUND = (0, 0, 0)
SCORE_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)

PALETTE = {
    int(TetrominoType.I): (0, 255, 255),
    int(TetrominoType.O): (255, 255, 0),
    int(TetrominoType.L): (255, 0, 0),
    int(TetrominoType.J): (0, 255, 0),
    int(TetrominoType.T): (255, 0, 255),
    int(TetrominoType.S): (255, 255, 255),
    int(TetrominoType.Z): (255, 128, 0),
}


def _color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(v, (200, 200, 200))


class Renderer:
    def __init__(
        self,
        block_size: int = 25,
        grid_width: int = GRID_WIDTH,
        grid_height: int = GRID_HEIGHT,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.block_size = block_size
        self.width = block_size * grid_width
        self.height = block_size * grid_height
        self._font = font

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        return self._font

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        # One pixel gap between neighbouring cells
        return pygame.Rect(
            x * self.block_size,
            y * self.block_size,
            self.block_size - 1,
            self.block_size - 1,
        )

    def render(self, surface: pygame.Surface, state: GameSnapshot) -> None:
        surface.fill(BACKGROUND)
        for block in state.piece:
            pygame.draw.rect(surface, _color_for_value(block.color), self.cell_rect(block.x, block.y))
        for x, y, color in state.occupied_cells():
            pygame.draw.rect(surface, _color_for_value(color), self.cell_rect(x, y))

        score = self.font.render(f"Score: {state.score}", True, SCORE_COLOR)
        surface.blit(score, (10, 10))

        if state.game_over:
            text = self.font.render("Game Over!", True, GAME_OVER_COLOR)
            surface.blit(text, (self.width // 2 - 40, self.height // 2))

    def draw(self, screen: pygame.Surface, state: GameSnapshot) -> None:
        self.render(screen, state)
        pygame.display.flip()

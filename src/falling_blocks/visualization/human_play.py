from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from falling_blocks.game import GameEngine, Key
from .renderer import Renderer


logger = logging.getLogger(__name__)

FPS = 60

KEY_BINDINGS: Dict[Key, int] = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.DOWN: pygame.K_DOWN,
    Key.UP: pygame.K_UP,
}


class PygameInput:
    """Held-key state read from pygame's keyboard snapshot."""

    def __init__(self, bindings: Optional[Dict[Key, int]] = None) -> None:
        self.bindings = dict(bindings if bindings is not None else KEY_BINDINGS)
        self._pressed = None

    def poll(self) -> None:
        self._pressed = pygame.key.get_pressed()

    def is_held(self, key: Key) -> bool:
        if self._pressed is None:
            return False
        return bool(self._pressed[self.bindings[key]])


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = GameEngine()
        renderer = Renderer(block_size=25)
        keys = PygameInput()

        screen = pygame.display.set_mode(renderer.screen_size)
        pygame.display.set_caption("Tetris")
        logger.info("window opened at %dx%d", *renderer.screen_size)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys.poll()
            game.update(pygame.time.get_ticks(), keys)
            renderer.draw(screen, game.snapshot())

            clock.tick(FPS)
        logger.info("closing with score %d", game.score)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()

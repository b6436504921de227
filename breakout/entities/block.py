from __future__ import annotations

import pygame

from breakout.core.geometry import Rect
from breakout.entities.base import Entity

BLOCK_SIZE = pygame.Vector2(100, 40)
BLOCK_LIVES = 2
BLOCK_SCORE = 10

RED = (230, 41, 55)
ORANGE = (255, 161, 0)


class Block(Entity):
    def __init__(self, pos: pygame.Vector2 | tuple[float, float]) -> None:
        x, y = pos
        super().__init__(Rect(float(x), float(y), BLOCK_SIZE.x, BLOCK_SIZE.y))
        self.lives = BLOCK_LIVES

    @property
    def alive(self) -> bool:
        return self.lives > 0

    @property
    def color(self) -> tuple[int, int, int]:
        return RED if self.lives == BLOCK_LIVES else ORANGE

    def hit(self) -> bool:
        """Resta una vida. True si el golpe lo ha destruido."""
        self.lives -= 1
        return self.lives <= 0


def block_grid(
    screen_width: float,
    *,
    columns: int = 6,
    rows: int = 6,
    padding: float = 5.0,
    top: float = 50.0,
) -> list[Block]:
    """Rejilla de bloques centrada en horizontal, fila a fila."""
    total = BLOCK_SIZE + pygame.Vector2(padding, padding)
    start = pygame.Vector2((screen_width - total.x * columns) * 0.5, top)

    blocks: list[Block] = []
    for i in range(columns * rows):
        offset = pygame.Vector2((i % columns) * total.x, (i // columns) * total.y)
        blocks.append(Block(start + offset))
    return blocks

from __future__ import annotations

import pygame

from breakout.core.geometry import Rect
from breakout.entities.base import Entity

PLAYER_SIZE = pygame.Vector2(150, 40)
PLAYER_SPEED = 700.0  # px/s
PLAYER_LIVES = 3


class Player(Entity):
    color = (0, 121, 241)

    def __init__(self, screen_width: float, screen_height: float) -> None:
        super().__init__(
            Rect(
                screen_width * 0.5 - PLAYER_SIZE.x * 0.5,
                screen_height - 100.0,
                PLAYER_SIZE.x,
                PLAYER_SIZE.y,
            )
        )
        self.lives = PLAYER_LIVES

    @staticmethod
    def move_dir(left: bool, right: bool) -> int:
        # ambas o ninguna: quieto
        if left and not right:
            return -1
        if right and not left:
            return 1
        return 0

    def update(self, dt: float, move: int, screen_width: float) -> None:
        self.rect.x += move * dt * PLAYER_SPEED

        # límites de pantalla
        self.rect.x = max(0.0, min(screen_width - self.rect.w, self.rect.x))

from __future__ import annotations

import random

import pygame

from breakout.core.geometry import Rect
from breakout.entities.base import Entity

BALL_SIZE = 50.0
BALL_SPEED = 400.0  # px/s


class Ball(Entity):
    color = (80, 80, 80)

    def __init__(
        self,
        pos: pygame.Vector2 | tuple[float, float],
        *,
        rng: random.Random | None = None,
    ) -> None:
        x, y = pos
        super().__init__(Rect(float(x), float(y), BALL_SIZE, BALL_SIZE))
        rng = rng or random.Random()
        # siempre hacia abajo, sesgo horizontal aleatorio
        self.vel = pygame.Vector2(rng.uniform(-1.0, 1.0), 1.0).normalize()

    def update(self, dt: float, screen_width: float) -> None:
        self.rect.x += self.vel.x * dt * BALL_SPEED
        self.rect.y += self.vel.y * dt * BALL_SPEED

        # invertir velocidad en los bordes laterales
        if self.rect.x < 0.0:
            self.vel.x = 1.0
        if self.rect.x > screen_width - self.rect.w:
            self.vel.x = -1.0

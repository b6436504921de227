from __future__ import annotations

import pygame

from breakout.core.geometry import Rect


class Entity:
    """
    Unidad básica del juego: un rectángulo que se dibuja.
    - No conoce escenas
    - No conoce input directamente
    - No gestiona el loop
    """

    color: pygame.Color | str | tuple[int, int, int] = (0, 0, 0)

    def __init__(self, rect: Rect) -> None:
        self.rect = rect

    def render(self, screen: pygame.Surface) -> None:
        """Dibujo."""
        pygame.draw.rect(screen, self.color, self.rect.to_pygame())

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Rect:
    """Rectángulo alineado a ejes con coordenadas float.

    pygame.Rect trunca a enteros; a 400 px/s y 60 fps el movimiento por
    frame se perdería en el redondeo.
    """

    x: float
    y: float
    w: float
    h: float

    def point(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    def size(self) -> pygame.Vector2:
        return pygame.Vector2(self.w, self.h)

    def center(self) -> pygame.Vector2:
        return self.point() + self.size() * 0.5

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def intersect(self, other: Rect) -> Rect | None:
        """Zona de solape, o None si no hay área en común (tocarse no cuenta)."""
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def to_pygame(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))

from __future__ import annotations

import pygame

from breakout.core.geometry import Rect


def _sign(value: float) -> float:
    # sign(0) == 0: centros alineados no empujan en ningún sentido
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def resolve_collision(a: Rect, vel: pygame.Vector2, b: Rect) -> bool:
    """
    Rebota `a` (móvil, con velocidad `vel`) contra `b` (estático).

    - Sin solape: devuelve False y no toca nada.
    - Solape más ancho que alto: choque vertical, se saca `a` en y por la
      altura del solape y vel.y apunta lejos del centro de `b`.
    - Si no: lo mismo en x.
    - Con los centros alineados en el eje elegido no hay desplazamiento y
      la componente de vel simplemente se invierte.

    Muta `a` y `vel` in place.
    """
    intersection = a.intersect(b)
    if intersection is None:
        return False

    to = b.center() - a.center()

    if intersection.w > intersection.h:
        # rebote en y
        sy = _sign(to.y)
        if sy == 0.0:
            vel.y = -vel.y
        else:
            a.y -= sy * intersection.h
            vel.y = -sy * abs(vel.y)
    else:
        # rebote en x
        sx = _sign(to.x)
        if sx == 0.0:
            vel.x = -vel.x
        else:
            a.x -= sx * intersection.w
            vel.x = -sx * abs(vel.x)

    return True

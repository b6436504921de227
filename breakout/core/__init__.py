from .collision import resolve_collision
from .geometry import Rect

__all__ = [
    "Rect",
    "resolve_collision",
]

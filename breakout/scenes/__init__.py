from .base import Scene
from .breakout import BreakoutScene

__all__ = [
    "Scene",
    "BreakoutScene",
]

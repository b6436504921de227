from .base import Entity
from .ball import Ball
from .block import Block, block_grid
from .player import Player

__all__ = [
    "Entity",
    "Ball",
    "Block",
    "Player",
    "block_grid",
]

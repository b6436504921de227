"""Shared fixtures: headless pygame and a deterministic game session."""

from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from breakout.core.game import Game

WIDTH, HEIGHT = 800, 600


@pytest.fixture
def game() -> Game:
    return Game(WIDTH, HEIGHT, rng=random.Random(1234))


@pytest.fixture
def playing(game: Game) -> Game:
    game.press_action()
    return game


@pytest.fixture(scope="session")
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()

"""Tests for breakout.scenes.breakout – input and render glue."""

from __future__ import annotations

import random
from collections import defaultdict

import pygame
import pytest

from breakout.core.game import Game, GameState
from breakout.entities.ball import Ball
from breakout.entities.block import ORANGE, RED
from breakout.entities.player import Player
from breakout.scenes import BreakoutScene

WIDTH, HEIGHT = 800, 600


class FakeApp:
    def __init__(self) -> None:
        self.screen = pygame.Surface((WIDTH, HEIGHT))
        self.running = True

    def font(self, size: int) -> pygame.font.Font:
        return pygame.font.Font(None, size)


@pytest.fixture
def app(fonts) -> FakeApp:
    return FakeApp()


@pytest.fixture
def scene(app) -> BreakoutScene:
    s = BreakoutScene(Game(WIDTH, HEIGHT, rng=random.Random(7)))
    s.on_enter(app)
    return s


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _color_at(screen: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(screen.get_at(pos))[:3]


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class TestEvents:
    def test_on_enter_builds_game_from_screen(self, app):
        s = BreakoutScene()
        s.on_enter(app)
        assert (s.game.width, s.game.height) == (WIDTH, HEIGHT)
        assert s.game.state is GameState.MENU

    def test_space_starts_game(self, app, scene):
        scene.handle_event(app, _key(pygame.K_SPACE))
        assert scene.game.state is GameState.PLAYING

    def test_each_space_press_is_one_action(self, app, scene):
        scene.handle_event(app, _key(pygame.K_SPACE))
        scene.handle_event(app, _key(pygame.K_SPACE))
        scene.handle_event(app, _key(pygame.K_SPACE))
        assert len(scene.game.balls) == 3

    def test_other_keys_ignored(self, app, scene):
        scene.handle_event(app, _key(pygame.K_LEFT))
        assert scene.game.state is GameState.MENU

    def test_quit_stops_app(self, app, scene):
        scene.handle_event(app, pygame.event.Event(pygame.QUIT))
        assert app.running is False

    def test_resize_updates_game(self, app, scene):
        scene.handle_event(
            app, pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768, size=(1024, 768))
        )
        assert (scene.game.width, scene.game.height) == (1024, 768)


class TestUpdate:
    def test_held_keys_move_player(self, app, scene, monkeypatch):
        pressed = defaultdict(bool, {pygame.K_LEFT: True})
        monkeypatch.setattr(pygame.key, "get_pressed", lambda: pressed)
        scene.game.press_action()
        x0 = scene.game.player.rect.x

        scene.update(app, 0.1)

        assert scene.game.player.rect.x < x0


# ---------------------------------------------------------------------------
# Render
# ---------------------------------------------------------------------------

class TestRender:
    @pytest.mark.parametrize("state", list(GameState))
    def test_renders_every_state(self, app, scene, state):
        scene.game.state = state
        scene.render(app, app.screen)

    def test_entities_drawn_with_their_colors(self, app, scene):
        game = scene.game
        game.balls = [Ball((700, 400), rng=game.rng)]
        game.blocks[1].hit()

        scene.render(app, app.screen)

        px = game.player.rect
        assert _color_at(app.screen, (int(px.x) + 5, int(px.y) + 5)) == Player.color
        b0, b1 = game.blocks[0].rect, game.blocks[1].rect
        assert _color_at(app.screen, (int(b0.x) + 5, int(b0.y) + 5)) == RED
        assert _color_at(app.screen, (int(b1.x) + 5, int(b1.y) + 5)) == ORANGE
        assert _color_at(app.screen, (725, 425)) == Ball.color

    def test_background_is_white(self, app, scene):
        scene.game.balls = []
        scene.render(app, app.screen)
        assert _color_at(app.screen, (WIDTH - 2, HEIGHT - 2)) == (255, 255, 255)

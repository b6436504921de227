from __future__ import annotations

import pygame

from breakout.core.game import Game, GameState, InputState
from breakout.scenes.base import AppLike, Scene

TITLE_SIZE = 50
HUD_SIZE = 30
TEXT_COLOR = "black"


class BreakoutScene(Scene):
    """Pegamento entre pygame (teclado, pantalla) y Game."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game

    def on_enter(self, app: AppLike) -> None:
        if self.game is None:
            w, h = app.screen.get_size()
            self.game = Game(w, h)

    def handle_event(self, app: AppLike, ev: pygame.event.Event) -> None:
        if ev.type == pygame.QUIT:
            app.running = False
            return

        if ev.type == pygame.VIDEORESIZE:
            self.game.resize(ev.w, ev.h)
            return

        # KEYDOWN = flanco: una acción por pulsación
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_SPACE:
            self.game.press_action()

    def update(self, app: AppLike, dt: float) -> None:
        pressed = pygame.key.get_pressed()
        keys = InputState(left=pressed[pygame.K_LEFT], right=pressed[pygame.K_RIGHT])
        self.game.update(dt, keys)

    # ---------- Render ----------
    def render(self, app: AppLike, screen: pygame.Surface) -> None:
        game = self.game
        screen.fill("white")

        game.player.render(screen)
        for block in game.blocks:
            block.render(screen)
        for ball in game.balls:
            ball.render(screen)

        match game.state:
            case GameState.MENU:
                self._draw_title_text(app, screen, "Press SPACE to start")
            case GameState.PLAYING:
                self._draw_hud(app, screen)
            case GameState.LEVEL_COMPLETED:
                self._draw_title_text(app, screen, f"You win! Score: {game.score}")
            case GameState.DEAD:
                self._draw_title_text(app, screen, f"You DIED! Score: {game.score}")

    def _draw_title_text(self, app: AppLike, screen: pygame.Surface, text: str) -> None:
        t = app.font(TITLE_SIZE).render(text, True, TEXT_COLOR)
        screen.blit(t, t.get_rect(center=screen.get_rect().center))

    def _draw_hud(self, app: AppLike, screen: pygame.Surface) -> None:
        font = app.font(HUD_SIZE)

        score = font.render(f"score: {self.game.score}", True, TEXT_COLOR)
        screen.blit(score, score.get_rect(midtop=(screen.get_width() // 2, 40)))

        lives = font.render(f"lives: {self.game.player.lives}", True, TEXT_COLOR)
        screen.blit(lives, (30, 40))

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from breakout.core.collision import resolve_collision
from breakout.entities.ball import Ball
from breakout.entities.block import BLOCK_SCORE, Block, block_grid
from breakout.entities.player import Player

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    LEVEL_COMPLETED = auto()
    DEAD = auto()


@dataclass(frozen=True)
class InputState:
    """Teclas mantenidas en este frame."""

    left: bool = False
    right: bool = False

    @property
    def move(self) -> int:
        return Player.move_dir(self.left, self.right)


class Game:
    """Estado de la partida: jugador, bloques, bolas, score y máquina de estados."""

    def __init__(
        self,
        width: float,
        height: float,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.rng = rng or random.Random()

        self.score = 0
        self.state = GameState.MENU
        self.player = Player(self.width, self.height)
        self.blocks: list[Block] = []
        self.balls: list[Ball] = []

        # la primera sesión arranca con una bola ya en pantalla
        self.init_blocks()
        self.init_ball()

    # ---------- Sesión ----------
    def reset(self) -> None:
        self.state = GameState.MENU
        self.score = 0
        self.player = Player(self.width, self.height)
        self.balls = []
        self.blocks = []
        self.init_blocks()
        logger.info("Partida reiniciada")

    def init_blocks(self) -> None:
        self.blocks.extend(block_grid(self.width))

    def init_ball(self) -> Ball:
        ball = Ball((self.width * 0.5, self.height * 0.5), rng=self.rng)
        self.balls.append(ball)
        logger.debug("Bola nueva, vel=%s (%d en juego)", ball.vel, len(self.balls))
        return ball

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def _set_state(self, state: GameState) -> None:
        if state is self.state:
            return
        logger.info("Estado %s -> %s (score=%d)", self.state.name, state.name, self.score)
        self.state = state

    # ---------- Input ----------
    def press_action(self) -> None:
        """Pulsación de la tecla de acción (flanco, un evento por pulsación)."""
        if self.state is GameState.MENU:
            self._set_state(GameState.PLAYING)
        elif self.state is GameState.PLAYING:
            self.init_ball()
        elif self.state in (GameState.LEVEL_COMPLETED, GameState.DEAD):
            self.reset()

    # ---------- Simulación ----------
    def update(self, dt: float, keys: InputState) -> None:
        if self.state is not GameState.PLAYING:
            return
        self.update_player(dt, keys)
        self.update_balls(dt)
        self.check_collision()

    def update_player(self, dt: float, keys: InputState) -> None:
        self.player.update(dt, keys.move, self.width)

    def update_balls(self, dt: float) -> None:
        for ball in self.balls:
            ball.update(dt, self.width)

    def check_collision(self) -> None:
        for ball in self.balls:
            resolve_collision(ball.rect, ball.vel, self.player.rect)
            for block in self.blocks:
                # un bloque ya destruido este frame no rebota ni puntúa otra vez
                if not block.alive:
                    continue
                if resolve_collision(ball.rect, ball.vel, block.rect):
                    if block.hit():
                        self.score += BLOCK_SCORE

        # solo cuenta si antes de limpiar quedaba exactamente una bola
        balls_len = len(self.balls)
        was_last_ball = balls_len == 1
        self.balls = [ball for ball in self.balls if ball.rect.y < self.height]
        removed_balls = balls_len - len(self.balls)
        if removed_balls:
            logger.debug("%d bola(s) fuera de pantalla", removed_balls)
        if removed_balls > 0 and was_last_ball:
            self.player.lives -= 1
            if self.player.lives <= 0:
                self._set_state(GameState.DEAD)

        self.blocks = [block for block in self.blocks if block.alive]

        if not self.blocks:
            self._set_state(GameState.LEVEL_COMPLETED)

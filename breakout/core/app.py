from __future__ import annotations

import logging
from pathlib import Path

import pygame

from breakout.core.config import WindowConfig
from breakout.scenes.base import Scene
from breakout.scenes.breakout import BreakoutScene

logger = logging.getLogger(__name__)


class App:
    """Ventana, reloj y loop: eventos -> update -> render -> flip."""

    def __init__(self, cfg: WindowConfig, scene: Scene | None = None) -> None:
        self.cfg = cfg
        self.running = False
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self.font_path = self.load_font(cfg.font_path)
        self.scene: Scene | None = None
        self._pending_scene = scene

    @staticmethod
    def load_font(path: Path | None) -> Path | None:
        """
        Carga la fuente del HUD antes de abrir la ventana.

        Sin fallback: una ruta que no existe lanza FileNotFoundError y un
        fichero que no es una fuente válida lanza pygame.error.
        """
        if path is None:
            return None
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"No se encuentra la fuente {path}")

        pygame.font.init()
        try:
            font = pygame.font.Font(path.as_posix(), 30)
            # pygame no rechaza un fichero corrupto hasta que renderiza
            font.render("A", True, "black")
        except (pygame.error, OSError) as exc:
            raise pygame.error(f"Fuente inválida {path}: {exc}") from exc

        logger.info("Fuente: %s", path)
        return path

    def font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            path = self.font_path.as_posix() if self.font_path is not None else None
            font = pygame.font.Font(path, size)
            self._fonts[size] = font
        return font

    def set_scene(self, scene: Scene) -> None:
        if self.scene is not None:
            self.scene.on_exit(self)
        self.scene = scene
        scene.on_enter(self)

    def run(self) -> None:
        pygame.init()
        try:
            flags = pygame.RESIZABLE if self.cfg.resizable else 0
            self.screen = pygame.display.set_mode(self.cfg.size, flags)
            pygame.display.set_caption(self.cfg.title)
            self.clock = pygame.time.Clock()

            self.set_scene(self._pending_scene or BreakoutScene())
            self.running = True
            logger.info("Loop arrancado a %d fps", self.cfg.fps)

            while self.running:
                dt = self.clock.tick(self.cfg.fps) / 1000.0
                for ev in pygame.event.get():
                    self.scene.handle_event(self, ev)
                if not self.running:
                    break
                self.scene.update(self, dt)
                self.scene.render(self, self.screen)
                pygame.display.flip()

            self.scene.on_exit(self)
        finally:
            pygame.quit()

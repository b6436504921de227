from __future__ import annotations

from typing import Protocol

import pygame


class AppLike(Protocol):
    """Lo mínimo que una escena necesita de la app."""

    screen: pygame.Surface
    running: bool

    def font(self, size: int) -> pygame.font.Font: ...


class Scene:
    def on_enter(self, app: AppLike) -> None:
        """Se llama cuando la escena pasa a ser la activa."""
        pass

    def on_exit(self, app: AppLike) -> None:
        """Se llama cuando la escena deja de ser la activa."""
        pass

    def handle_event(self, app: AppLike, ev: pygame.event.Event) -> None:
        pass

    def update(self, app: AppLike, dt: float) -> None:
        pass

    def render(self, app: AppLike, screen: pygame.Surface) -> None:
        pass

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from breakout.core.app import App
from breakout.core.config import load_window_config

logger = logging.getLogger("breakout")


def _settings_path() -> Path:
    # settings.toml viaja dentro del paquete
    return Path(__file__).resolve().parent / "settings.toml"


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_window_config(_settings_path())
    # los loggers de módulo cuelgan de "breakout"
    logger.setLevel(cfg.log_level)

    try:
        app = App(cfg)
    except (FileNotFoundError, pygame.error) as exc:
        logger.critical("%s", exc)
        raise SystemExit(1) from exc
    app.run()


if __name__ == "__main__":
    main()

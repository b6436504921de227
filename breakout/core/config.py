from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class WindowConfig:
    width: int = 800
    height: int = 600
    title: str = "breakout"
    fps: int = 60
    resizable: bool = False
    # None -> fuente por defecto de pygame
    font_path: Path | None = None
    log_level: str = "WARNING"

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


def _positive_int(table: dict[str, Any], key: str, default: int) -> int:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"[window].{key} debe ser un entero positivo, no {value!r}")
    return value


def load_window_config(path: Path) -> WindowConfig:
    """
    Lee la tabla [window] de un settings.toml.

    Si el fichero no existe se usan los valores por defecto. Una ruta de
    fuente relativa se resuelve contra la carpeta del propio settings.toml.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No hay %s, usando configuración por defecto", path)
        return WindowConfig()

    with path.open("rb") as fh:
        data = tomllib.load(fh)

    window = data.get("window", {})
    if not isinstance(window, dict):
        raise ValueError("[window] debe ser una tabla")

    defaults = WindowConfig()

    title = window.get("title", defaults.title)
    if not isinstance(title, str):
        raise ValueError(f"[window].title debe ser texto, no {title!r}")

    resizable = window.get("resizable", defaults.resizable)
    if not isinstance(resizable, bool):
        raise ValueError(f"[window].resizable debe ser booleano, no {resizable!r}")

    font_path: Path | None = None
    raw_font = window.get("font_path", "")
    if not isinstance(raw_font, str):
        raise ValueError(f"[window].font_path debe ser texto, no {raw_font!r}")
    if raw_font:
        font_path = Path(raw_font)
        if not font_path.is_absolute():
            font_path = path.parent / font_path

    log_level = window.get("log_level", defaults.log_level)
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ValueError(f"[window].log_level debe ser uno de {LOG_LEVELS}, no {log_level!r}")

    cfg = WindowConfig(
        width=_positive_int(window, "width", defaults.width),
        height=_positive_int(window, "height", defaults.height),
        title=title,
        fps=_positive_int(window, "fps", defaults.fps),
        resizable=resizable,
        font_path=font_path,
        log_level=log_level.upper(),
    )
    logger.info("Configuración cargada de %s: %s", path, cfg)
    return cfg

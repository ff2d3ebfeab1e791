"""Application configuration persistence.

Stores lightweight host state between sessions: main window geometry, the
maximized flag and the zoom factor. Kept free of Qt imports so it can be
tested headless.

- Explicit ``version`` field; files from another version load as defaults.
- Corrupt or unreadable files produce defaults instead of raising.
- Writes go to a temp file that is then renamed into place.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["AppConfig", "load_config", "save_config", "CONFIG_VERSION", "DEFAULT_FILENAME"]

CONFIG_VERSION = 1

DEFAULT_FILENAME = "app_state.json"

_log = logging.getLogger(__name__)


def _optional_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


@dataclass(slots=True)
class AppConfig:
    """Serializable host state.

    Attributes
    ----------
    version: Schema version for migration handling.
    window_x, window_y: Last top-left window coordinates (None if unknown).
    window_w, window_h: Last window size.
    maximized: Whether the window was maximized at shutdown.
    zoom_factor: Last UI zoom factor (1.0 is native size).
    """

    version: int = CONFIG_VERSION
    window_x: Optional[int] = None
    window_y: Optional[int] = None
    window_w: Optional[int] = None
    window_h: Optional[int] = None
    maximized: bool = False
    zoom_factor: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        zoom = data.get("zoom_factor", 1.0)
        if isinstance(zoom, bool) or not isinstance(zoom, (int, float)):
            zoom = 1.0
        return cls(
            version=int(data.get("version", CONFIG_VERSION)),
            window_x=_optional_int(data.get("window_x")),
            window_y=_optional_int(data.get("window_y")),
            window_w=_optional_int(data.get("window_w")),
            window_h=_optional_int(data.get("window_h")),
            maximized=bool(data.get("maximized", False)),
            zoom_factor=float(zoom),
        )

    def is_geometry_complete(self) -> bool:
        return (
            self.window_x is not None
            and self.window_y is not None
            and self.window_w is not None
            and self.window_h is not None
        )


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / DEFAULT_FILENAME


def load_config(base_dir: str | Path | None = None) -> AppConfig:
    """Load the host config from ``base_dir`` (defaults to CWD)."""
    path = _resolve_path(base_dir)
    if not path.exists():
        return AppConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("config root is not an object")
        cfg = AppConfig.from_dict(data)
    except (OSError, ValueError, TypeError):
        _log.warning("Ignoring unreadable app config %s", path)
        return AppConfig()
    if cfg.version != CONFIG_VERSION:
        _log.info("App config version %s != %s, using defaults", cfg.version, CONFIG_VERSION)
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, base_dir: str | Path | None = None) -> Path:
    """Persist the host config. Returns the path written."""
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path

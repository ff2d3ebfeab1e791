"""Persistence of the open-window record across sessions.

Saves what ``DemoWindows.to_dict()`` returns as a versioned JSON sidecar and
feeds it back through ``DemoWindows.restore``. Panels themselves are never
stored; they are re-registered at startup and only the open-name sets and the
about flag travel.

Features:
 - Version tag; files written by another version are backed up and ignored
 - Corrupt files are renamed aside (``.corrupt.bak``) so the next save starts clean
 - Atomic write via temp file + replace
 - Never raises for I/O or format problems; callers get False and a log line
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Protocol

__all__ = ["WindowStateStore", "STATE_VERSION", "STATE_FILENAME"]

STATE_VERSION = 1
STATE_FILENAME = "demo_windows.json"

_log = logging.getLogger(__name__)


class _Persistable(Protocol):
    def to_dict(self) -> Dict[str, Any]: ...  # pragma: no cover - structural

    def restore(self, data: Dict[str, Any], *, prune_stale: bool = False) -> None: ...  # pragma: no cover


class WindowStateStore:
    def __init__(self, base_dir: str):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    @property
    def path(self) -> str:
        return os.path.join(self.base_dir, STATE_FILENAME)

    # Internal helpers ----------------------------------------------
    def _read(self) -> Optional[Dict[str, Any]]:
        """Return the stored record, or None when missing, corrupt or from another version.

        Invalid files are moved aside before returning None.
        """
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError):
            _log.warning("Window state file unreadable, backing up: %s", self.path)
            self._backup(".corrupt.bak")
            return None
        if not isinstance(obj, dict):
            self._backup(".corrupt.bak")
            return None
        version = obj.get("version")
        if version != STATE_VERSION:
            _log.info("Window state version %r != %d, ignoring", version, STATE_VERSION)
            suffix = f".v{version}.bak" if isinstance(version, int) else ".bak"
            self._backup(suffix)
            return None
        return obj

    def _backup(self, suffix: str) -> None:
        new_path = self.path + suffix
        if os.path.exists(new_path):
            i = 1
            while os.path.exists(f"{new_path}.{i}") and i < 10:
                i += 1
            new_path = f"{new_path}.{i}"
        try:
            os.replace(self.path, new_path)
        except OSError:
            _log.exception("Could not back up window state file %s", self.path)

    # Public API ----------------------------------------------------
    def save(self, windows: _Persistable) -> bool:
        record = dict(windows.to_dict())
        record["version"] = STATE_VERSION
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(record, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError:
            _log.exception("Failed to save window state to %s", self.path)
            return False
        _log.debug("Saved window state to %s", self.path)
        return True

    def load(self, windows: _Persistable, *, prune_stale: bool = False) -> bool:
        record = self._read()
        if record is None:
            return False
        windows.restore(record, prune_stale=prune_stale)
        return True

    def reset(self) -> bool:
        """Delete the stored record. Returns True if a file was removed."""
        if not os.path.exists(self.path):
            return False
        try:
            os.remove(self.path)
        except OSError:
            _log.exception("Failed to remove window state file %s", self.path)
            return False
        return True

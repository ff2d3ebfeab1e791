"""Runtime settings for the gallery shell.

Defaults come from ``config.settings`` (environment driven). Tests and the
launcher replace ``SettingsService.instance`` or register their own copy in
the service locator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from config import settings


@dataclass
class SettingsService:
    """Runtime toggles for layout and persistence.

    Attributes:
        compact_max_width: Viewports narrower than this use the compact
            layout (about splash, collapsible demo menu).
        persist_window_state: When True the Qt host saves the open-window
            record on close and restores it on start.
        prune_stale_on_load: When True, restored open names that match no
            registered panel are dropped instead of being carried along.
        frame_interval_ms: Delay used to coalesce input into the next frame.
    """

    instance: ClassVar["SettingsService"]

    compact_max_width: int = settings.COMPACT_MAX_WIDTH
    persist_window_state: bool = True
    prune_stale_on_load: bool = False
    frame_interval_ms: int = settings.FRAME_INTERVAL_MS


SettingsService.instance = SettingsService()

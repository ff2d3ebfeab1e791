"""Layout mode selection by viewport width.

The gallery has two layout strategies:

 - compact:  narrow viewports (phones, split-screen). The about splash is
   shown first, and demo toggles live in a collapsible top-bar menu.
 - expanded: everything else. A fixed side panel lists the toggles and a
   File menu carries window-manager actions.

The mode is recomputed every frame from the surface metrics and is never
persisted. Width comparisons are exclusive on the compact upper bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gallery.components.surface import Surface
from gallery.services.service_locator import services
from gallery.services.settings_service import SettingsService

__all__ = ["LayoutMode", "Breakpoint", "classify_width", "is_compact_display"]


class LayoutMode(str, Enum):
    COMPACT = "compact"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class Breakpoint:
    mode: LayoutMode
    max_width: Optional[int]

    def is_within(self, width: float) -> bool:
        return self.max_width is None or width < self.max_width


def _compact_max_width() -> int:
    settings = services.try_get("settings") or SettingsService.instance
    return settings.compact_max_width


def classify_width(width: float, *, compact_max_width: Optional[int] = None) -> LayoutMode:
    limit = _compact_max_width() if compact_max_width is None else compact_max_width
    if Breakpoint(LayoutMode.COMPACT, limit).is_within(width):
        return LayoutMode.COMPACT
    return LayoutMode.EXPANDED


def is_compact_display(surface: Surface) -> bool:
    width, _height = surface.screen_size()
    return classify_width(width) is LayoutMode.COMPACT

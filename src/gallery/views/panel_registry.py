"""Ordered panel collection plus the set of open panel names.

Registration order is fixed at construction and defines toggle order, menu
order and the order windows are first shown in. The open set is keyed by
panel name; names that match no registered panel (typically restored from an
older session) are tolerated and simply render nothing.

Every registry starts with the widget gallery open, even when the gallery is
not one of its panels, so a first run shows something useful.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Set, Tuple

from gallery.components.panel import Panel
from gallery.components.surface import Surface
from gallery.demos.widget_gallery import WidgetGallery

__all__ = ["PanelRegistry", "DuplicatePanelName", "GALLERY_PANEL_NAME", "set_open"]

GALLERY_PANEL_NAME = WidgetGallery.name

_log = logging.getLogger(__name__)


class DuplicatePanelName(ValueError):
    """Raised when two panels passed to one registry share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate panel name: {name}")
        self.name = name


def set_open(open_names: Set[str], name: str, is_open: bool) -> None:
    if is_open:
        open_names.add(name)
    else:
        open_names.discard(name)


class PanelRegistry:
    def __init__(self, panels: Iterable[Panel]) -> None:
        self._panels: Tuple[Panel, ...] = tuple(panels)
        seen: Set[str] = set()
        for panel in self._panels:
            if panel.name in seen:
                raise DuplicatePanelName(panel.name)
            seen.add(panel.name)
        self.open: Set[str] = {GALLERY_PANEL_NAME}

    # Introspection -------------------------------------------------------
    @property
    def panels(self) -> Tuple[Panel, ...]:
        return self._panels

    def __iter__(self) -> Iterator[Panel]:
        return iter(self._panels)

    def __len__(self) -> int:
        return len(self._panels)

    def names(self) -> List[str]:
        return [p.name for p in self._panels]

    def is_open(self, name: str) -> bool:
        return name in self.open

    def open_names(self) -> List[str]:
        return sorted(self.open)

    def stale_names(self) -> List[str]:
        known = set(self.names())
        return sorted(n for n in self.open if n not in known)

    # Mutation ------------------------------------------------------------
    def set_open(self, name: str, is_open: bool) -> None:
        set_open(self.open, name, is_open)

    def prune_stale(self) -> List[str]:
        stale = self.stale_names()
        for name in stale:
            self.open.discard(name)
        return stale

    # Rendering -----------------------------------------------------------
    def render_toggles(self, surface: Surface) -> None:
        for panel in self._panels:
            is_open = panel.name in self.open
            is_open = surface.toggle_value(is_open, panel.name)
            set_open(self.open, panel.name, is_open)

    def render_open_panels(self, surface: Surface) -> None:
        for panel in self._panels:
            is_open = panel.name in self.open
            is_open = panel.show(surface, is_open)
            set_open(self.open, panel.name, is_open)

    # Persistence ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"open": self.open_names()}

    def restore(self, data: Dict[str, Any], *, prune_stale: bool = False) -> None:
        """Replace the open set from a persisted record.

        A missing or malformed ``open`` entry keeps the current set.
        """
        names = data.get("open") if isinstance(data, dict) else None
        if not isinstance(names, list):
            return
        self.open = {n for n in names if isinstance(n, str)}
        stale = self.stale_names()
        if stale:
            if prune_stale:
                self.prune_stale()
                _log.debug("Pruned stale open panels: %s", ", ".join(stale))
            else:
                _log.debug("Restored open panels with no registered match: %s", ", ".join(stale))

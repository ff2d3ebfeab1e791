"""Top-level orchestrator: which demo windows are open and how to toggle them.

``DemoWindows`` is the per-frame entry point used by the host. Each frame it
asks the compact predicate which layout to use:

 - compact:  about splash with a "Continue" button until dismissed, then a
   top bar with a collapsible demo menu, then the open windows
 - expanded: a fixed side panel with the toggle lists, a top bar with the
   File menu, then the open windows

State lives in ``DemoWindowsData`` behind a re-entrant lock. ``clone()`` hands
out another handle to the same data so host callbacks can reach it; the lock
keeps a callback from interleaving with a frame in progress.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict, Optional

from config import settings

from gallery.components.surface import Surface, WindowOptions
from gallery.demos.about import About
from gallery.demos.lineup import default_demos, default_tests
from gallery.design.responsive import is_compact_display
from gallery.services.event_bus import EventBus, GalleryEvent
from gallery.services.service_locator import services
from gallery.services.shortcut_registry import ORGANIZE_WINDOWS, RESET_MEMORY

from .panel_registry import PanelRegistry
from .zoom import zoom_menu_buttons, zoom_with_keyboard_shortcuts

__all__ = [
    "DemoWindowsData",
    "DemoWindows",
    "CONTINUE_LABEL",
    "DEMO_MENU_LABEL",
    "ORGANIZE_LABEL",
    "RESET_LABEL",
]

CONTINUE_LABEL = "Continue to the demo!"
ORGANIZE_LABEL = "Organize Windows"
RESET_LABEL = "Reset Gallery Memory"
RESET_TOOLTIP = "Forget scroll, positions, sizes etc"
DEMO_MENU_LABEL = "⏷ demos"
MENU_FONT_SIZE = 16.5

_log = logging.getLogger(__name__)


def _publish(name: GalleryEvent, payload: Any = None) -> None:
    bus = services.try_get("event_bus")
    if isinstance(bus, EventBus):
        bus.publish(name, payload)


def organize_windows(surface: Surface) -> None:
    surface.reset_areas()
    _publish(GalleryEvent.WINDOWS_ORGANIZED)


def reset_memory(surface: Surface) -> None:
    surface.reset_memory()
    _publish(GalleryEvent.MEMORY_RESET)


class DemoWindowsData:
    def __init__(
        self,
        *,
        about: Optional[About] = None,
        demos: Optional[PanelRegistry] = None,
        tests: Optional[PanelRegistry] = None,
        about_is_open: bool = True,
    ) -> None:
        self.about_is_open = about_is_open
        self.about = about or About()
        self.demos = demos if demos is not None else PanelRegistry(default_demos())
        self.tests = tests if tests is not None else PanelRegistry(default_tests())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "about_is_open": self.about_is_open,
            "demos": self.demos.to_dict(),
            "tests": self.tests.to_dict(),
        }

    def restore(self, data: Dict[str, Any], *, prune_stale: bool = False) -> None:
        """Apply a persisted record; missing or ill-typed fields keep current values."""
        if not isinstance(data, dict):
            return
        about_is_open = data.get("about_is_open")
        if isinstance(about_is_open, bool):
            self.about_is_open = about_is_open
        demos = data.get("demos")
        if isinstance(demos, dict):
            self.demos.restore(demos, prune_stale=prune_stale)
        tests = data.get("tests")
        if isinstance(tests, dict):
            self.tests.restore(tests, prune_stale=prune_stale)


class DemoWindows:
    """Menu bar and windows for the gallery."""

    def __init__(
        self,
        data: Optional[DemoWindowsData] = None,
        *,
        compact_predicate: Callable[[Surface], bool] = is_compact_display,
        lock: Optional[RLock] = None,
    ) -> None:
        """
        Args:
            data: Shared state; a fresh default line-up if None.
            compact_predicate: Picks the compact layout for a surface.
            lock: Guards ``data``. Handles sharing ``data`` must share the lock;
                ``clone()`` takes care of that.
        """
        self._data = data if data is not None else DemoWindowsData()
        self._lock = lock if lock is not None else RLock()
        self._compact_predicate = compact_predicate

    def clone(self) -> "DemoWindows":
        return DemoWindows(self._data, compact_predicate=self._compact_predicate, lock=self._lock)

    @property
    def data(self) -> DemoWindowsData:
        return self._data

    @property
    def about_is_open(self) -> bool:
        with self._lock:
            return self._data.about_is_open

    # Persistence ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            return self._data.to_dict()

    def restore(self, data: Dict[str, Any], *, prune_stale: bool = False) -> None:
        with self._lock:
            self._data.restore(data, prune_stale=prune_stale)
        _publish(GalleryEvent.STATE_RESTORED, self.to_dict())

    # Frame entry point ---------------------------------------------------
    def ui(self, surface: Surface) -> None:
        """Show the gallery UI (menu bar and windows) for one frame."""
        with self._lock:
            # Zoom keys work in either layout, about splash included.
            zoom_with_keyboard_shortcuts(surface)
            if self._compact_predicate(surface):
                self._compact_ui(surface)
            else:
                self._expanded_ui(surface)

    def is_compact(self, surface: Surface) -> bool:
        return self._compact_predicate(surface)

    # Compact layout ------------------------------------------------------
    def _compact_ui(self, surface: Surface) -> None:
        data = self._data
        if data.about_is_open:
            screen_w, _screen_h = surface.screen_size()
            options = WindowOptions(
                default_width=min(screen_w - 20.0, 400.0),
                default_height=surface.available_height() - 46.0,
                anchor_center=True,
                vscroll=True,
                resizable=False,
                collapsible=False,
            )
            dismissed = False
            with surface.window(data.about.name, open=True, options=options) as window:
                if window.open:
                    data.about.ui(surface)
                    surface.add_space(12.0)
                    with surface.centered():
                        if surface.button(CONTINUE_LABEL, font_size=20.0):
                            dismissed = True
            if dismissed or not window.open:
                data.about_is_open = False
                _log.debug("About splash dismissed")
                _publish(GalleryEvent.ABOUT_DISMISSED)
        else:
            self._compact_top_bar(surface)
            self._show_windows(surface)

    def _compact_top_bar(self, surface: Surface) -> None:
        with surface.top_bar("menu_bar"):
            with surface.menu(DEMO_MENU_LABEL, font_size=MENU_FONT_SIZE) as menu:
                if menu.open:
                    self._demo_list_ui(surface)
                    if menu.clicked_inside:
                        menu.close()
            with surface.right_to_left():
                surface.hyperlink("Source", settings.PROJECT_URL)

    # Expanded layout -----------------------------------------------------
    def _expanded_ui(self, surface: Surface) -> None:
        with surface.side_panel("demo_panel", default_width=150.0, resizable=False):
            with surface.centered():
                surface.heading(f"✒ {settings.APP_NAME}")
            surface.separator()
            surface.hyperlink(f"{settings.APP_NAME} source", settings.PROJECT_URL)
            surface.separator()
            self._demo_list_ui(surface)

        with surface.top_bar("menu_bar"):
            self._file_menu_button(surface)

        self._show_windows(surface)

    def _file_menu_button(self, surface: Surface) -> None:
        # Shortcuts are checked outside the File menu so they fire while it is closed.
        if surface.consume_shortcut(ORGANIZE_WINDOWS):
            organize_windows(surface)
        if surface.consume_shortcut(RESET_MEMORY):
            reset_memory(surface)

        with surface.menu("File") as menu:
            if not menu.open:
                return
            zoom_menu_buttons(surface, menu)
            surface.separator()
            if surface.button(
                ORGANIZE_LABEL, shortcut_text=surface.format_shortcut(ORGANIZE_WINDOWS)
            ):
                organize_windows(surface)
                menu.close()
            if surface.button(
                RESET_LABEL,
                shortcut_text=surface.format_shortcut(RESET_MEMORY),
                tooltip=RESET_TOOLTIP,
            ):
                reset_memory(surface)
                menu.close()

    # Shared pieces -------------------------------------------------------
    def _show_windows(self, surface: Surface) -> None:
        data = self._data
        data.about_is_open = data.about.show(surface, data.about_is_open)
        data.demos.render_open_panels(surface)
        data.tests.render_open_panels(surface)

    def _demo_list_ui(self, surface: Surface) -> None:
        data = self._data
        with surface.scroll_area():
            data.about_is_open = surface.toggle_value(data.about_is_open, data.about.name)
            surface.separator()
            data.demos.render_toggles(surface)
            surface.separator()
            data.tests.render_toggles(surface)
            surface.separator()
            if surface.button("Organize windows"):
                organize_windows(surface)

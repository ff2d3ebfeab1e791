"""Qt host window for the gallery.

Owns the ``QtSurface`` and drives ``DemoWindows.ui`` one frame at a time.
Frames are event driven: any input on the surface, a shortcut, a resize or a
window close schedules one frame after ``frame_interval_ms``, coalescing
bursts of input.

On start the open-window record and the host config (geometry, zoom) are
restored; on close both are written back.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QMainWindow

from config import settings

from gallery.app.bootstrap import AppContext
from gallery.app.config_store import save_config
from gallery.components.qt_surface import QtSurface
from gallery.components.surface import Surface
from gallery.design.responsive import is_compact_display
from gallery.services.event_bus import Event, GalleryEvent

from .demo_windows import DEMO_MENU_LABEL, DemoWindows

__all__ = ["MainWindow"]

_log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        ctx: AppContext,
        *,
        windows: Optional[DemoWindows] = None,
        compact_predicate: Callable[[Surface], bool] = is_compact_display,
    ) -> None:
        super().__init__()
        self._ctx = ctx
        self._runtime = ctx.settings
        self.setWindowTitle(settings.APP_NAME)

        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.timeout.connect(self.run_frame)
        self.frames_run = 0
        self.resize(1280, 800)

        self.surface = QtSurface(self, request_frame=self.request_frame)
        self.windows = windows or DemoWindows(compact_predicate=compact_predicate)

        if self._runtime.persist_window_state:
            ctx.window_state.load(self.windows, prune_stale=self._runtime.prune_stale_on_load)
        self._restore_config()

        bus = ctx.event_bus
        self._subscriptions = [
            bus.subscribe(GalleryEvent.ZOOM_CHANGED, self._on_zoom_changed),
            bus.subscribe(GalleryEvent.MEMORY_RESET, self._on_memory_reset),
            bus.subscribe(GalleryEvent.ABOUT_DISMISSED, self._on_about_dismissed, once=True),
        ]
        self.request_frame()

    # Frame loop -----------------------------------------------------
    def request_frame(self) -> None:
        if not self._frame_timer.isActive():
            self._frame_timer.start(self._runtime.frame_interval_ms)

    def run_frame(self) -> None:
        self.surface.begin_frame()
        try:
            self.windows.ui(self.surface)
        finally:
            self.surface.end_frame()
        self.frames_run += 1

    # Config ---------------------------------------------------------
    def _restore_config(self) -> None:
        cfg = self._ctx.app_config
        if cfg.is_geometry_complete():
            self.setGeometry(cfg.window_x, cfg.window_y, cfg.window_w, cfg.window_h)
        if cfg.maximized:
            self.setWindowState(self.windowState() | Qt.WindowState.WindowMaximized)
        if cfg.zoom_factor != self.surface.zoom_factor:
            self.surface.zoom_factor = cfg.zoom_factor

    def _record_geometry(self) -> None:
        cfg = self._ctx.app_config
        cfg.maximized = self.isMaximized()
        if not cfg.maximized:
            geometry = self.geometry()
            cfg.window_x = geometry.x()
            cfg.window_y = geometry.y()
            cfg.window_w = geometry.width()
            cfg.window_h = geometry.height()
        cfg.zoom_factor = self.surface.zoom_factor

    def _on_zoom_changed(self, event: Event) -> None:
        self._ctx.app_config.zoom_factor = float(event.payload)
        self.request_frame()

    def _on_memory_reset(self, _event: Event) -> None:
        self.statusBar().showMessage("Gallery memory reset", 3000)

    def _on_about_dismissed(self, _event: Event) -> None:
        self.statusBar().showMessage(f"Open more demos from the {DEMO_MENU_LABEL} menu", 5000)

    # Qt event overrides -------------------------------------------
    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self.request_frame()

    def closeEvent(self, event):  # type: ignore[override]
        try:
            self._record_geometry()
            save_config(self._ctx.app_config, self._ctx.data_dir)
            if self._runtime.persist_window_state:
                self._ctx.window_state.save(self.windows)
        except OSError:
            _log.exception("Failed to persist state on close")
        finally:
            for sub in self._subscriptions:
                self._ctx.event_bus.unsubscribe(sub)
            super().closeEvent(event)

"""Application bootstrap for the panel gallery.

Responsibilities:
 - Logging setup (console format + in-process ring buffer)
 - Optional headless bootstrap (tests, smoke runs, machines without a display)
 - Loading the persisted host config
 - Registering core services in the global locator

PyQt6 is imported lazily so that test collection and the headless runner do
not need a GUI stack.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from config import settings

from gallery.app.config_store import AppConfig, load_config
from gallery.services.event_bus import EventBus, GalleryEvent
from gallery.services.logging_service import LoggingService, configure_logging
from gallery.services.service_locator import ServiceLocator, services
from gallery.services.settings_service import SettingsService
from gallery.services.shortcut_registry import ShortcutRegistry, register_default_shortcuts
from gallery.services.window_state_persistence import WindowStateStore

try:  # Lazy / optional Qt import
    from PyQt6.QtWidgets import QApplication  # type: ignore

    _QT_AVAILABLE = True
except ImportError:
    QApplication = None  # type: ignore
    _QT_AVAILABLE = False

__all__ = ["AppContext", "create_app", "qt_available"]

_log = logging.getLogger(__name__)


def qt_available() -> bool:
    return _QT_AVAILABLE


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication (None when headless)
    headless: Whether headless bootstrap was used
    data_dir: Directory holding persisted state files
    services: Global service locator after registration
    app_config: Host config loaded from ``data_dir``
    window_state: Store for the open-window record
    duration_s: Seconds spent in bootstrap
    """

    qt_app: Optional[Any]
    headless: bool
    data_dir: str
    services: ServiceLocator
    app_config: AppConfig
    window_state: WindowStateStore
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def event_bus(self) -> EventBus:
        return self.services.get_typed("event_bus", EventBus)

    @property
    def logging_service(self) -> LoggingService:
        return self.services.get_typed("logging_service", LoggingService)

    @property
    def settings(self) -> SettingsService:
        return self.services.get_typed("settings", SettingsService)


def create_app(
    *,
    headless: bool | None = None,
    data_dir: str | None = None,
    log_level: str | None = None,
    settings_service: SettingsService | None = None,
) -> AppContext:
    """Create and initialize the application context.

    Parameters
    ----------
    headless: Skip the QApplication. If None, inferred from Qt availability.
    data_dir: Directory for persisted state (defaults to ``settings.DATA_DIR``).
    log_level: Level name for the console logger (defaults to settings).
    settings_service: Runtime toggles; a fresh copy of the defaults if None.
    """
    started = time.perf_counter()
    if headless is None:
        headless = not _QT_AVAILABLE
    data_dir = data_dir or settings.DATA_DIR
    os.makedirs(data_dir, exist_ok=True)

    level = configure_logging(log_level)
    logging_service = services.try_get("logging_service")
    if not isinstance(logging_service, LoggingService):
        logging_service = LoggingService()
    logging_service.attach_root()

    qt_app = None
    if not headless:
        if not _QT_AVAILABLE:
            raise RuntimeError("PyQt6 is required for the windowed gallery; use --headless-frames")
        qt_app = QApplication.instance() or QApplication(sys.argv[:1])
        qt_app.setApplicationName(settings.APP_NAME)

    app_config = load_config(data_dir)
    runtime = settings_service or SettingsService()
    shortcuts = ShortcutRegistry()
    register_default_shortcuts(shortcuts)

    # Each bootstrap gets fresh instances so repeated calls (tests) stay isolated.
    for name, value in [
        ("settings", runtime),
        ("app_config", app_config),
        ("event_bus", EventBus()),
        ("logging_service", logging_service),
        ("shortcut_registry", shortcuts),
    ]:
        services.register(name, value, allow_override=True, origin="bootstrap")

    ctx = AppContext(
        qt_app=qt_app,
        headless=headless,
        data_dir=data_dir,
        services=services,
        app_config=app_config,
        window_state=WindowStateStore(data_dir),
        duration_s=time.perf_counter() - started,
        metadata={
            "qt_available": _QT_AVAILABLE,
            "log_level": logging.getLevelName(level),
            "app_config": app_config.to_dict(),
        },
    )
    _log.info("Bootstrap finished in %.3fs (headless=%s)", ctx.duration_s, headless)
    ctx.event_bus.publish(GalleryEvent.STARTUP_COMPLETE, ctx.metadata)
    return ctx

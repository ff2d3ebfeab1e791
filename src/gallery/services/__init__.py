"""Service layer exports.

Responsibilities:
 - Dependency/service locator (`services`)
 - EventBus publish/subscribe core
 - Shortcut registry, runtime settings, logging capture
 - Open-window state persistence
"""

from .service_locator import services, ServiceLocator  # noqa: F401
from .event_bus import EventBus, GalleryEvent  # noqa: F401
from .settings_service import SettingsService  # noqa: F401
from .shortcut_registry import KeyboardShortcut, ShortcutRegistry  # noqa: F401
from .window_state_persistence import WindowStateStore  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "EventBus",
    "GalleryEvent",
    "SettingsService",
    "KeyboardShortcut",
    "ShortcutRegistry",
    "WindowStateStore",
]

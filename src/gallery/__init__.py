"""Panel Gallery public API.

Small surface for callers (launcher, tests, embedding hosts) that should not
depend on deep module paths. Nothing here imports PyQt6; the Qt host lives
in ``gallery.views.main_window`` and ``gallery.components.qt_surface``.
"""

from __future__ import annotations

# Infrastructure
from .services.service_locator import (  # noqa: F401
    services,
    ServiceLocator,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .services.event_bus import EventBus, GalleryEvent, Event  # noqa: F401

# Core
from .components.surface import Surface, WindowOptions  # noqa: F401
from .components.panel import Panel, DemoPanel  # noqa: F401
from .views.panel_registry import PanelRegistry, DuplicatePanelName  # noqa: F401
from .views.demo_windows import DemoWindows, DemoWindowsData  # noqa: F401
from .app.bootstrap import AppContext, create_app  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "ServiceAlreadyRegisteredError",
    "ServiceNotFoundError",
    "EventBus",
    "GalleryEvent",
    "Event",
    "Surface",
    "WindowOptions",
    "Panel",
    "DemoPanel",
    "PanelRegistry",
    "DuplicatePanelName",
    "DemoWindows",
    "DemoWindowsData",
    "AppContext",
    "create_app",
]

__version__ = "0.1.0"

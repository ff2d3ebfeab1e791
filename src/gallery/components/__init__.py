"""Surface contract and panel base classes.

``QtSurface`` lives in ``gallery.components.qt_surface`` and is imported
explicitly by the Qt host so this package stays importable without PyQt6.
"""

from __future__ import annotations

from .surface import Surface, WindowHandle, MenuHandle, WindowOptions  # noqa: F401
from .panel import Panel, DemoPanel  # noqa: F401

__all__ = [
    "Surface",
    "WindowHandle",
    "MenuHandle",
    "WindowOptions",
    "Panel",
    "DemoPanel",
]

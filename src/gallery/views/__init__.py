"""Gallery view layer.

Exports:
 - Panel / DemoPanel (panel contract)
 - PanelRegistry (ordered panels + open-name set)
 - DemoWindows (per-frame orchestrator)

The Qt host (``gallery.views.main_window``) is not imported here so the core
stays importable without PyQt6.
"""

from gallery.components.panel import Panel, DemoPanel  # noqa: F401
from .panel_registry import PanelRegistry, DuplicatePanelName, GALLERY_PANEL_NAME  # noqa: F401
from .demo_windows import DemoWindows, DemoWindowsData  # noqa: F401

__all__ = [
    "Panel",
    "DemoPanel",
    "PanelRegistry",
    "DuplicatePanelName",
    "GALLERY_PANEL_NAME",
    "DemoWindows",
    "DemoWindowsData",
]

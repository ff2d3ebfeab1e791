"""Immediate-mode drawing surface contract.

Every frame the orchestrator and the demo panels describe the whole UI by
calling into a ``Surface``. Interactive widgets return the value the user
left them with (a toggle returns its new state, a button returns True on the
frame it was clicked), so callers keep their own state and never register
callbacks.

Containers are context managers. ``window`` and ``menu`` yield small handle
objects carrying per-frame state: whether the window is still open after the
user pressed its close control, whether a click landed inside the menu.

Two implementations ship with the package:
 - ``gallery.components.qt_surface.QtSurface`` reconciles calls onto cached
   PyQt6 widgets
 - ``gallery.testing.recording_surface.RecordingSurface`` records calls and
   replays scripted input for headless tests
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ContextManager, Optional, Protocol, Tuple, runtime_checkable

from gallery.services.shortcut_registry import KeyboardShortcut

__all__ = ["Surface", "WindowHandle", "MenuHandle", "WindowOptions"]


@dataclass
class WindowHandle:
    """Per-frame state of one window.

    ``open`` starts as the value the caller passed and is cleared by the
    surface when the user pressed the window's close control.
    """

    title: str
    open: bool

    @property
    def visible(self) -> bool:
        return self.open


@dataclass
class MenuHandle:
    label: str
    open: bool = True
    clicked_inside: bool = False
    close_requested: bool = False

    def close(self) -> None:
        self.close_requested = True


@dataclass(frozen=True)
class WindowOptions:
    default_width: Optional[float] = None
    default_height: Optional[float] = None
    anchor_center: bool = False
    vscroll: bool = False
    resizable: bool = True
    collapsible: bool = True
    closable: bool = True


@runtime_checkable
class Surface(Protocol):
    # Metrics ------------------------------------------------------------
    def screen_size(self) -> Tuple[float, float]: ...

    def available_height(self) -> float: ...

    @property
    def zoom_factor(self) -> float: ...

    @zoom_factor.setter
    def zoom_factor(self, value: float) -> None: ...

    # Input --------------------------------------------------------------
    def consume_shortcut(self, shortcut: KeyboardShortcut) -> bool: ...

    def format_shortcut(self, shortcut: KeyboardShortcut) -> str: ...

    # Window manager -----------------------------------------------------
    def reset_areas(self) -> None: ...

    def reset_memory(self) -> None: ...

    # Containers ---------------------------------------------------------
    def side_panel(
        self, panel_id: str, *, default_width: float = 150.0, resizable: bool = True
    ) -> ContextManager[None]: ...

    def top_bar(self, panel_id: str) -> ContextManager[None]: ...

    def menu(self, label: str, *, font_size: Optional[float] = None) -> ContextManager[MenuHandle]: ...

    def window(
        self, title: str, *, open: bool = True, options: Optional[WindowOptions] = None
    ) -> ContextManager[WindowHandle]: ...

    def scroll_area(self) -> ContextManager[None]: ...

    def centered(self) -> ContextManager[None]: ...

    def right_to_left(self) -> ContextManager[None]: ...

    # Widgets ------------------------------------------------------------
    def heading(self, text: str) -> None: ...

    def label(self, text: str) -> None: ...

    def separator(self) -> None: ...

    def add_space(self, amount: float) -> None: ...

    def hyperlink(self, text: str, url: str) -> None: ...

    def toggle_value(self, selected: bool, text: str) -> bool: ...

    def button(
        self,
        text: str,
        *,
        shortcut_text: Optional[str] = None,
        tooltip: Optional[str] = None,
        font_size: Optional[float] = None,
        enabled: bool = True,
    ) -> bool: ...

    def checkbox(self, checked: bool, text: str) -> bool: ...

    def slider(self, value: float, minimum: float, maximum: float, text: str) -> float: ...

    def text_edit(self, text: str, *, key: str, multiline: bool = False) -> str: ...

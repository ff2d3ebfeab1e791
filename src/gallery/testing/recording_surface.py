"""Headless ``Surface`` that records calls and replays scripted input.

Tests script what the user "did" before a frame (click a label, press a
shortcut, close a window, drag a slider) and then inspect what the frame
drew. Scripted input is consumed by the first matching widget, the same way a
real surface delivers one click to one widget.

Example:
    surface = RecordingSurface(width=1280)
    windows.ui(surface)
    surface.click("Sliders")
    windows.ui(surface)
    assert "Sliders" in surface.window_titles()
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from gallery.components.surface import MenuHandle, WindowHandle, WindowOptions
from gallery.services.shortcut_registry import KeyboardShortcut

__all__ = ["Call", "RecordingSurface"]


@dataclass(frozen=True)
class Call:
    kind: str
    text: str
    value: Any = None
    container: Tuple[str, ...] = ()


class RecordingSurface:
    def __init__(
        self,
        *,
        width: float = 1280.0,
        height: float = 800.0,
        available_height: Optional[float] = None,
        menus_open: bool = True,
    ) -> None:
        self.width = width
        self.height = height
        self._available_height = available_height
        self.menus_open = menus_open
        self.calls: List[Call] = []
        self.frames = 0
        self.reset_areas_count = 0
        self.reset_memory_count = 0
        self.closed_menus: List[str] = []
        self._zoom_factor = 1.0
        self._clicks: List[str] = []
        self._shortcuts: List[str] = []
        self._window_closes: Set[str] = set()
        self._slider_values: Dict[str, float] = {}
        self._text_values: Dict[str, str] = {}
        self._stack: List[str] = []
        self._menus: List[MenuHandle] = []

    # Scripting ------------------------------------------------------------
    def click(self, label: str) -> "RecordingSurface":
        self._clicks.append(label)
        return self

    def press(self, shortcut: KeyboardShortcut | str) -> "RecordingSurface":
        if isinstance(shortcut, str):
            shortcut = KeyboardShortcut.parse(shortcut)
        self._shortcuts.append(shortcut.sequence)
        return self

    def close_window(self, title: str) -> "RecordingSurface":
        self._window_closes.add(title)
        return self

    def set_slider(self, label: str, value: float) -> "RecordingSurface":
        self._slider_values[label] = value
        return self

    def set_text(self, key: str, text: str) -> "RecordingSurface":
        self._text_values[key] = text
        return self

    def resize(self, width: float, height: Optional[float] = None) -> "RecordingSurface":
        self.width = width
        if height is not None:
            self.height = height
        return self

    def begin_frame(self) -> None:
        self.calls.clear()
        self.closed_menus.clear()
        self.frames += 1

    def run_frame(self, ui: Callable[["RecordingSurface"], None]) -> "RecordingSurface":
        self.begin_frame()
        ui(self)
        # Unread shortcuts and closes expire with the frame, as on a real surface.
        self._shortcuts.clear()
        self._window_closes.clear()
        return self

    @property
    def pending_clicks(self) -> List[str]:
        return list(self._clicks)

    # Queries --------------------------------------------------------------
    def texts(self, kind: str) -> List[str]:
        return [c.text for c in self.calls if c.kind == kind]

    def window_titles(self) -> List[str]:
        """Titles of windows drawn open this frame, in draw order."""
        return [c.text for c in self.calls if c.kind == "window" and c.value]

    def toggles(self, container: Optional[str] = None) -> List[Tuple[str, bool]]:
        return [
            (c.text, c.value)
            for c in self.calls
            if c.kind == "toggle" and (container is None or container in c.container)
        ]

    def containers(self) -> List[str]:
        return [c.text for c in self.calls if c.kind in ("side_panel", "top_bar", "menu")]

    # Internal -------------------------------------------------------------
    def _record(self, kind: str, text: str, value: Any = None) -> None:
        self.calls.append(Call(kind, text, value, tuple(self._stack)))

    def _take_click(self, label: str) -> bool:
        if label not in self._clicks:
            return False
        self._clicks.remove(label)
        if self._menus:
            self._menus[-1].clicked_inside = True
        return True

    @contextmanager
    def _container(self, kind: str, name: str, value: Any = None) -> Iterator[None]:
        self._record(kind, name, value)
        self._stack.append(f"{kind}:{name}")
        try:
            yield
        finally:
            self._stack.pop()

    # Metrics --------------------------------------------------------------
    def screen_size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def available_height(self) -> float:
        return self._available_height if self._available_height is not None else self.height

    @property
    def zoom_factor(self) -> float:
        return self._zoom_factor

    @zoom_factor.setter
    def zoom_factor(self, value: float) -> None:
        self._zoom_factor = value

    # Input ----------------------------------------------------------------
    def consume_shortcut(self, shortcut: KeyboardShortcut) -> bool:
        if shortcut.sequence in self._shortcuts:
            self._shortcuts.remove(shortcut.sequence)
            return True
        return False

    def format_shortcut(self, shortcut: KeyboardShortcut) -> str:
        return shortcut.sequence

    # Window manager -------------------------------------------------------
    def reset_areas(self) -> None:
        self.reset_areas_count += 1

    def reset_memory(self) -> None:
        self.reset_memory_count += 1

    # Containers -----------------------------------------------------------
    def side_panel(self, panel_id: str, *, default_width: float = 150.0, resizable: bool = True):
        return self._container("side_panel", panel_id, default_width)

    def top_bar(self, panel_id: str):
        return self._container("top_bar", panel_id)

    @contextmanager
    def menu(self, label: str, *, font_size: Optional[float] = None) -> Iterator[MenuHandle]:
        handle = MenuHandle(label=label, open=self.menus_open)
        self._menus.append(handle)
        try:
            with self._container("menu", label, font_size):
                yield handle
        finally:
            self._menus.pop()
            if handle.close_requested:
                self.closed_menus.append(label)

    @contextmanager
    def window(
        self, title: str, *, open: bool = True, options: Optional[WindowOptions] = None
    ) -> Iterator[WindowHandle]:
        handle = WindowHandle(title=title, open=open)
        if open and title in self._window_closes:
            self._window_closes.discard(title)
            handle.open = False
        self._record("window_options", title, options)
        with self._container("window", title, handle.open):
            yield handle

    def scroll_area(self):
        return self._container("scroll_area", "")

    def centered(self):
        return self._container("centered", "")

    def right_to_left(self):
        return self._container("right_to_left", "")

    # Widgets --------------------------------------------------------------
    def heading(self, text: str) -> None:
        self._record("heading", text)

    def label(self, text: str) -> None:
        self._record("label", text)

    def separator(self) -> None:
        self._record("separator", "")

    def add_space(self, amount: float) -> None:
        self._record("space", "", amount)

    def hyperlink(self, text: str, url: str) -> None:
        self._record("hyperlink", text, url)

    def toggle_value(self, selected: bool, text: str) -> bool:
        if self._take_click(text):
            selected = not selected
        self._record("toggle", text, selected)
        return selected

    def button(
        self,
        text: str,
        *,
        shortcut_text: Optional[str] = None,
        tooltip: Optional[str] = None,
        font_size: Optional[float] = None,
        enabled: bool = True,
    ) -> bool:
        self._record("button", text, shortcut_text)
        return enabled and self._take_click(text)

    def checkbox(self, checked: bool, text: str) -> bool:
        if self._take_click(text):
            checked = not checked
        self._record("checkbox", text, checked)
        return checked

    def slider(self, value: float, minimum: float, maximum: float, text: str) -> float:
        if text in self._slider_values:
            value = min(max(self._slider_values.pop(text), minimum), maximum)
        self._record("slider", text, value)
        return value

    def text_edit(self, text: str, *, key: str, multiline: bool = False) -> str:
        if key in self._text_values:
            text = self._text_values.pop(key)
        self._record("text_edit", key, text)
        return text

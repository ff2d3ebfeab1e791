"""Windows listed under "tests": small checks of surface behaviour."""

from __future__ import annotations

from typing import List

from gallery.components.panel import DemoPanel
from gallery.components.surface import Surface

__all__ = [
    "CursorTest",
    "Highlighting",
    "IdTest",
    "InputTest",
    "LayoutTest",
    "ManualLayoutTest",
    "TableTest",
]


class CursorTest(DemoPanel):
    name = "Cursor Test"

    CURSORS = ("Default", "Pointer", "Text", "Crosshair", "Grab", "Wait", "Not allowed")

    def ui(self, surface: Surface) -> None:
        surface.heading("Hover to switch cursor icon:")
        for cursor in self.CURSORS:
            surface.label(cursor)


class Highlighting(DemoPanel):
    name = "Highlighting"

    def __init__(self) -> None:
        self.highlighted = -1

    def ui(self, surface: Surface) -> None:
        surface.label("Clicking a row highlights it; clicking again clears it.")
        for row in range(5):
            if surface.toggle_value(self.highlighted == row, f"Row {row}"):
                self.highlighted = row
            elif self.highlighted == row:
                self.highlighted = -1


class IdTest(DemoPanel):
    name = "Id Test"

    def ui(self, surface: Surface) -> None:
        surface.heading("Name collision example")
        surface.label(
            "Two widgets with the same label in one container must still be told apart "
            "by the surface; both buttons below work independently."
        )
        surface.button("Collide")
        surface.button("Collide")


class InputTest(DemoPanel):
    name = "Input Test"

    def __init__(self) -> None:
        self.history: List[str] = []

    def ui(self, surface: Surface) -> None:
        for name in ("Primary", "Secondary"):
            if surface.button(f"{name} click"):
                self.history.append(name)
        self.history = self.history[-10:]
        surface.label("History: " + (", ".join(self.history) or "-"))
        if surface.button("Clear history"):
            self.history.clear()


class LayoutTest(DemoPanel):
    name = "Layout Test"

    def __init__(self) -> None:
        self.right_to_left = False

    def ui(self, surface: Surface) -> None:
        self.right_to_left = surface.checkbox(self.right_to_left, "Right to left")
        if self.right_to_left:
            with surface.right_to_left():
                self._contents(surface)
        else:
            self._contents(surface)

    def _contents(self, surface: Surface) -> None:
        for index in range(3):
            surface.label(f"Item {index}")


class ManualLayoutTest(DemoPanel):
    name = "Manual Layout Test"

    def __init__(self) -> None:
        self.spacing = 8.0

    def ui(self, surface: Surface) -> None:
        self.spacing = surface.slider(self.spacing, 0.0, 50.0, "Spacing")
        surface.label("Above")
        surface.add_space(self.spacing)
        surface.label("Below")


class TableTest(DemoPanel):
    name = "Table Test"

    def __init__(self) -> None:
        self.columns = 3

    def ui(self, surface: Surface) -> None:
        self.columns = int(surface.slider(self.columns, 1, 8, "Columns"))
        for row in range(4):
            surface.label(" | ".join(f"r{row}c{col}" for col in range(self.columns)))

"""The demo windows listed under "demos" in the side panel.

Each demo keeps its own state between frames and draws through the surface
widgets only. Content is kept small; the gallery shell is the
subject here, not the widgets.
"""

from __future__ import annotations

import math
import time
from typing import List, Tuple

from gallery.components.panel import DemoPanel
from gallery.components.surface import Surface, WindowOptions

__all__ = [
    "PaintBezier",
    "CodeEditor",
    "CodeExample",
    "ContextMenus",
    "DancingStrings",
    "DragAndDropDemo",
    "FontBook",
    "MiscDemoWindow",
    "MultiTouch",
    "Painting",
    "PlotDemo",
    "Scrolling",
    "Sliders",
    "StripDemo",
    "TableDemo",
    "TextEdit",
    "WindowOptionsDemo",
    "WindowResizeTest",
    "WindowWithPanels",
]


class PaintBezier(DemoPanel):
    name = "Bézier Curve"

    def __init__(self) -> None:
        self.degree = 4
        self.points: List[Tuple[float, float]] = [(50, 50), (60, 250), (200, 200), (250, 50)]
        self.closed = False

    def ui(self, surface: Surface) -> None:
        self.degree = int(surface.slider(self.degree, 3, 4, "Degree"))
        self.closed = surface.checkbox(self.closed, "Closed shape")
        points = self.points[: self.degree]
        surface.label("Control points: " + ", ".join(f"({x:.0f}, {y:.0f})" for x, y in points))
        mid = _bezier_point(points, 0.5)
        surface.label(f"Curve midpoint: ({mid[0]:.1f}, {mid[1]:.1f})")


def _bezier_point(points: List[Tuple[float, float]], t: float) -> Tuple[float, float]:
    pts = list(points)
    while len(pts) > 1:
        pts = [
            (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t) for a, b in zip(pts, pts[1:])
        ]
    return pts[0]


class CodeEditor(DemoPanel):
    name = "Code Editor"

    def __init__(self) -> None:
        self.language = "py"
        self.code = 'def greet(name):\n    return f"Hello {name}!"\n'

    def ui(self, surface: Surface) -> None:
        surface.label(f"Language: {self.language}")
        self.code = surface.text_edit(self.code, key="code_editor.code", multiline=True)
        surface.label(f"{len(self.code.splitlines())} line(s)")


class CodeExample(DemoPanel):
    name = "Code Example"

    def __init__(self) -> None:
        self.name_value = "Arthur"
        self.age = 42.0

    def ui(self, surface: Surface) -> None:
        self.name_value = surface.text_edit(self.name_value, key="code_example.name")
        self.age = surface.slider(self.age, 0, 120, "age")
        if surface.button("Increment"):
            self.age = min(self.age + 1, 120)
        surface.label(f"Hello '{self.name_value}', age {int(self.age)}")


class ContextMenus(DemoPanel):
    name = "Context Menus"

    def __init__(self) -> None:
        self.show_axes = True
        self.allow_drag = True

    def ui(self, surface: Surface) -> None:
        surface.label("Options normally found in a right-click menu:")
        self.show_axes = surface.checkbox(self.show_axes, "Show axes")
        self.allow_drag = surface.checkbox(self.allow_drag, "Allow drag")
        if surface.button("Reset"):
            self.show_axes = True
            self.allow_drag = True


class DancingStrings(DemoPanel):
    name = "Dancing Strings"

    def ui(self, surface: Surface) -> None:
        t = time.monotonic()
        for mode in range(1, 4):
            amplitude = math.sin(t * mode)
            surface.label(f"mode {mode}: amplitude {amplitude:+.2f}")


class DragAndDropDemo(DemoPanel):
    name = "Drag and Drop"

    def __init__(self) -> None:
        self.columns: List[List[str]] = [
            ["Item A", "Item B", "Item C"],
            ["Item D", "Item E"],
            ["Item F", "Item G", "Item H"],
        ]

    def ui(self, surface: Surface) -> None:
        surface.label("Move the first item of a column to the next column.")
        for index, column in enumerate(self.columns):
            surface.label(f"Column {index + 1}: " + ", ".join(column))
            if column and surface.button(f"Move from column {index + 1}"):
                target = self.columns[(index + 1) % len(self.columns)]
                target.append(column.pop(0))


class FontBook(DemoPanel):
    name = "Font Book"

    def __init__(self) -> None:
        self.filter = ""

    def ui(self, surface: Surface) -> None:
        self.filter = surface.text_edit(self.filter, key="font_book.filter")
        needle = self.filter.lower()
        shown = 0
        for code in range(0x2190, 0x21C0):
            char = chr(code)
            label = f"U+{code:04X} {char}"
            if needle and needle not in label.lower():
                continue
            surface.label(label)
            shown += 1
        if not shown:
            surface.label("No glyphs match the filter.")


class MiscDemoWindow(DemoPanel):
    name = "Misc Demos"

    def __init__(self) -> None:
        self.counter = 0
        self.wrap = True

    def ui(self, surface: Surface) -> None:
        surface.heading("Counter")
        if surface.button("+1"):
            self.counter += 1
        if surface.button("-1"):
            self.counter -= 1
        surface.label(f"Count: {self.counter}")
        surface.separator()
        self.wrap = surface.checkbox(self.wrap, "Wrap long text")


class MultiTouch(DemoPanel):
    name = "Multi Touch"

    def ui(self, surface: Surface) -> None:
        surface.label("Pinch, rotate and drag with two fingers on a touch screen.")
        surface.label("No touch device detected; gestures are reported here when available.")


class Painting(DemoPanel):
    name = "Painting"

    def __init__(self) -> None:
        self.strokes: List[int] = []
        self.stroke_width = 1.0

    def ui(self, surface: Surface) -> None:
        self.stroke_width = surface.slider(self.stroke_width, 0.5, 10.0, "Stroke width")
        if surface.button("Add stroke"):
            self.strokes.append(len(self.strokes) + 1)
        if surface.button("Clear painting"):
            self.strokes.clear()
        surface.label(f"{len(self.strokes)} stroke(s)")


class PlotDemo(DemoPanel):
    name = "Plot"

    def __init__(self) -> None:
        self.samples = 8
        self.show_cos = True

    def ui(self, surface: Surface) -> None:
        self.samples = int(surface.slider(self.samples, 2, 32, "Samples"))
        self.show_cos = surface.checkbox(self.show_cos, "Show cos")
        for i in range(self.samples):
            x = 2 * math.pi * i / self.samples
            text = f"x={x:.2f} sin={math.sin(x):+.2f}"
            if self.show_cos:
                text += f" cos={math.cos(x):+.2f}"
            surface.label(text)


class Scrolling(DemoPanel):
    name = "Scrolling"
    window_options = WindowOptions(vscroll=True)

    def __init__(self) -> None:
        self.rows = 50

    def ui(self, surface: Surface) -> None:
        self.rows = int(surface.slider(self.rows, 10, 500, "Rows"))
        with surface.scroll_area():
            for row in range(self.rows):
                surface.label(f"Row {row + 1}")


class Sliders(DemoPanel):
    name = "Sliders"

    def __init__(self) -> None:
        self.minimum = 0.0
        self.maximum = 10000.0
        self.value = 10.0
        self.integer = False

    def ui(self, surface: Surface) -> None:
        self.value = surface.slider(self.value, self.minimum, self.maximum, "Value")
        if self.integer:
            self.value = float(round(self.value))
        self.integer = surface.checkbox(self.integer, "Integer")
        self.minimum = surface.slider(self.minimum, -10000.0, self.maximum, "Min")
        self.maximum = surface.slider(self.maximum, self.minimum, 10000.0, "Max")
        self.value = min(max(self.value, self.minimum), self.maximum)
        surface.label(f"Value: {self.value}")


class StripDemo(DemoPanel):
    name = "Strip"

    def ui(self, surface: Surface) -> None:
        for size, text in (("exact 50", "fixed"), ("remainder", "fills"), ("relative 0.5", "half")):
            surface.label(f"{size}: {text}")


class TableDemo(DemoPanel):
    name = "Table"

    def __init__(self) -> None:
        self.rows = 10
        self.striped = True

    def ui(self, surface: Surface) -> None:
        self.rows = int(surface.slider(self.rows, 0, 100, "Rows"))
        self.striped = surface.checkbox(self.striped, "Striped")
        surface.label("Row | Expanding content | Clipped text")
        for row in range(self.rows):
            surface.label(f"{row:>3} | {'long ' * (row % 4 + 1)}| thirteen chars")


class TextEdit(DemoPanel):
    name = "TextEdit"

    def __init__(self) -> None:
        self.text = "Edit this text"

    def ui(self, surface: Surface) -> None:
        self.text = surface.text_edit(self.text, key="text_edit.text", multiline=True)
        surface.label(f"{len(self.text)} character(s)")
        if surface.button("Uppercase"):
            self.text = self.text.upper()


class WindowOptionsDemo(DemoPanel):
    name = "Window Options"

    def __init__(self) -> None:
        self.title = "Window Options"
        self.resizable = True
        self.collapsible = True
        self.vscroll = False

    @property
    def window_options(self) -> WindowOptions:  # type: ignore[override]
        return WindowOptions(
            resizable=self.resizable, collapsible=self.collapsible, vscroll=self.vscroll
        )

    def ui(self, surface: Surface) -> None:
        self.resizable = surface.checkbox(self.resizable, "resizable")
        self.collapsible = surface.checkbox(self.collapsible, "collapsible")
        self.vscroll = surface.checkbox(self.vscroll, "vscroll")


class WindowResizeTest(DemoPanel):
    name = "Window Resize Test"
    window_options = WindowOptions(default_width=300.0, default_height=200.0)

    def ui(self, surface: Surface) -> None:
        surface.label("This window can be resized freely; its content follows.")


class WindowWithPanels(DemoPanel):
    name = "Window With Panels"

    def ui(self, surface: Surface) -> None:
        surface.heading("Top panel")
        surface.separator()
        surface.label("Central panel")
        surface.separator()
        surface.heading("Bottom panel")

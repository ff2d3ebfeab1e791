"""Default demo and test line-ups.

The factories return fresh instances in registration order; that order is
the order of the toggles in the side panel and menus.
"""

from __future__ import annotations

from typing import List

from gallery.components.panel import DemoPanel

from .diagnostics import (
    CursorTest,
    Highlighting,
    IdTest,
    InputTest,
    LayoutTest,
    ManualLayoutTest,
    TableTest,
)
from .showcase import (
    CodeEditor,
    CodeExample,
    ContextMenus,
    DancingStrings,
    DragAndDropDemo,
    FontBook,
    MiscDemoWindow,
    MultiTouch,
    Painting,
    PaintBezier,
    PlotDemo,
    Scrolling,
    Sliders,
    StripDemo,
    TableDemo,
    TextEdit,
    WindowOptionsDemo,
    WindowResizeTest,
    WindowWithPanels,
)
from .widget_gallery import WidgetGallery

__all__ = ["default_demos", "default_tests"]


def default_demos() -> List[DemoPanel]:
    return [
        PaintBezier(),
        CodeEditor(),
        CodeExample(),
        ContextMenus(),
        DancingStrings(),
        DragAndDropDemo(),
        FontBook(),
        MiscDemoWindow(),
        MultiTouch(),
        Painting(),
        PlotDemo(),
        Scrolling(),
        Sliders(),
        StripDemo(),
        TableDemo(),
        TextEdit(),
        WidgetGallery(),
        WindowOptionsDemo(),
        WindowResizeTest(),
        WindowWithPanels(),
    ]


def default_tests() -> List[DemoPanel]:
    return [
        CursorTest(),
        Highlighting(),
        IdTest(),
        InputTest(),
        LayoutTest(),
        ManualLayoutTest(),
        TableTest(),
    ]

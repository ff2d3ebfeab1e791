"""Widget gallery: one of each basic widget, opened by default on first run."""

from __future__ import annotations

from gallery.components.panel import DemoPanel
from gallery.components.surface import Surface


class WidgetGallery(DemoPanel):
    name = "Widget Gallery"

    def __init__(self) -> None:
        self.enabled = True
        self.boolean = False
        self.radio = 0
        self.scalar = 42.0
        self.string = ""
        self.clicks = 0

    def ui(self, surface: Surface) -> None:
        self.enabled = surface.checkbox(self.enabled, "Interactive")
        surface.separator()

        surface.label("Label: Welcome to the widget gallery!")
        surface.hyperlink("Hyperlink", "https://www.python.org")
        if surface.button("Click me!", enabled=self.enabled):
            self.clicks += 1
        surface.label(f"Clicked {self.clicks} time(s)")
        self.boolean = surface.checkbox(self.boolean, "Checkbox")
        for index, text in enumerate(("First", "Second", "Third")):
            if surface.toggle_value(self.radio == index, text):
                self.radio = index
        self.scalar = surface.slider(self.scalar, 0.0, 360.0, "Slider")
        self.string = surface.text_edit(self.string, key="widget_gallery.text")

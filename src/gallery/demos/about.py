"""About panel: what the gallery is and how to use it."""

from __future__ import annotations

from config import settings

from gallery.components.panel import DemoPanel
from gallery.components.surface import Surface


class About(DemoPanel):
    name = f"About {settings.APP_NAME}"

    def ui(self, surface: Surface) -> None:
        surface.heading(settings.APP_NAME)
        surface.label(
            "A gallery of small interactive demos drawn through an immediate-mode "
            "surface: every frame the whole UI is described again and the surface "
            "reports back what the user did."
        )
        surface.add_space(8.0)
        surface.label("Toggle demos from the side panel (or the demos menu on small screens).")
        surface.label("Windows remember whether they are open between sessions.")
        surface.add_space(8.0)
        surface.hyperlink("Source code", settings.PROJECT_URL)

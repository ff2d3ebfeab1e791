"""Concrete gallery panels.

 - ``about``: the About panel shown as a splash on compact displays
 - ``widget_gallery``: opened by default on first run
 - ``showcase``: the "demos" line-up
 - ``diagnostics``: the "tests" line-up
 - ``lineup``: factories returning both line-ups in registration order
"""

from __future__ import annotations

from .about import About  # noqa: F401
from .widget_gallery import WidgetGallery  # noqa: F401
from .lineup import default_demos, default_tests  # noqa: F401

__all__ = ["About", "WidgetGallery", "default_demos", "default_tests"]

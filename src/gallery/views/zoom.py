"""Zoom controls shared by the File menu and the global key handler."""

from __future__ import annotations

from gallery.components.surface import Surface
from gallery.services.event_bus import EventBus, GalleryEvent
from gallery.services.service_locator import services
from gallery.services.shortcut_registry import ZOOM_IN, ZOOM_OUT, ZOOM_RESET

__all__ = [
    "NATIVE_ZOOM",
    "MIN_ZOOM",
    "MAX_ZOOM",
    "zoom_in",
    "zoom_out",
    "reset_zoom",
    "zoom_menu_buttons",
    "zoom_with_keyboard_shortcuts",
]

NATIVE_ZOOM = 1.0
MIN_ZOOM = 0.2
MAX_ZOOM = 5.0
ZOOM_STEP = 0.1


def _apply(surface: Surface, factor: float) -> None:
    factor = round(factor * 10.0) / 10.0
    if factor == surface.zoom_factor:
        return
    surface.zoom_factor = factor
    bus = services.try_get("event_bus")
    if isinstance(bus, EventBus):
        bus.publish(GalleryEvent.ZOOM_CHANGED, factor)


def zoom_in(surface: Surface) -> None:
    _apply(surface, min(surface.zoom_factor + ZOOM_STEP, MAX_ZOOM))


def zoom_out(surface: Surface) -> None:
    _apply(surface, max(surface.zoom_factor - ZOOM_STEP, MIN_ZOOM))


def reset_zoom(surface: Surface) -> None:
    _apply(surface, NATIVE_ZOOM)


def zoom_with_keyboard_shortcuts(surface: Surface) -> None:
    if surface.consume_shortcut(ZOOM_RESET):
        reset_zoom(surface)
    else:
        if surface.consume_shortcut(ZOOM_IN):
            zoom_in(surface)
        if surface.consume_shortcut(ZOOM_OUT):
            zoom_out(surface)


def zoom_menu_buttons(surface: Surface, menu=None) -> None:
    """Render Zoom In / Zoom Out / Reset Zoom; ``menu`` is closed after any of them fires."""
    fired = False
    if surface.button(
        "Zoom In",
        shortcut_text=surface.format_shortcut(ZOOM_IN),
        enabled=surface.zoom_factor < MAX_ZOOM,
    ):
        zoom_in(surface)
        fired = True
    if surface.button(
        "Zoom Out",
        shortcut_text=surface.format_shortcut(ZOOM_OUT),
        enabled=surface.zoom_factor > MIN_ZOOM,
    ):
        zoom_out(surface)
        fired = True
    if surface.button(
        "Reset Zoom",
        shortcut_text=surface.format_shortcut(ZOOM_RESET),
        enabled=surface.zoom_factor != NATIVE_ZOOM,
    ):
        reset_zoom(surface)
        fired = True
    if fired and menu is not None:
        menu.close()

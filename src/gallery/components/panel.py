"""Panel contract and the window-backed base class used by the demos.

A panel has a stable ``name`` (used as the key in open-name sets and in
persisted state, so it must not change at runtime) and a ``show`` entry point
called once per frame with the current open flag. ``show`` returns the flag
after the frame; returning False asks the owner to close the panel.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from gallery.components.surface import Surface, WindowOptions

__all__ = ["Panel", "DemoPanel"]


@runtime_checkable
class Panel(Protocol):
    @property
    def name(self) -> str: ...

    def show(self, surface: Surface, is_open: bool) -> bool: ...


class DemoPanel:
    """Panel rendered inside its own closable window.

    Subclasses set ``name`` and implement ``ui``. ``window_options`` may be
    overridden for fixed-size or scrolling windows.
    """

    name: str = ""
    window_options: Optional[WindowOptions] = None

    def show(self, surface: Surface, is_open: bool) -> bool:
        if not is_open:
            return False
        with surface.window(self.name, open=is_open, options=self.window_options) as window:
            if window.open:
                self.ui(surface)
        return window.open

    def ui(self, surface: Surface) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}(name={self.name!r})"

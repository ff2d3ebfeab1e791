"""Keyboard shortcuts for gallery-wide commands.

``KeyboardShortcut`` is a value object (modifiers + key) whose ``sequence``
is a Qt-compatible string such as ``"Ctrl+Shift+O"``. The registry maps
logical ids to shortcuts so menus can show the key text and surfaces can
bind them.

Design Notes:
 - Pure Python; Qt bindings are created by the surface from ``sequence``
 - Duplicate id registration rejected; duplicate sequences are reported by
   ``find_conflicts`` rather than refused
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

__all__ = [
    "Modifiers",
    "KeyboardShortcut",
    "ShortcutEntry",
    "ShortcutRegistry",
    "ORGANIZE_WINDOWS",
    "RESET_MEMORY",
    "ZOOM_IN",
    "ZOOM_OUT",
    "ZOOM_RESET",
    "register_default_shortcuts",
]


class Modifiers:
    CTRL = "Ctrl"
    SHIFT = "Shift"
    ALT = "Alt"

    ORDER = (CTRL, ALT, SHIFT)


@dataclass(frozen=True)
class KeyboardShortcut:
    modifiers: Tuple[str, ...]
    key: str

    @classmethod
    def parse(cls, sequence: str) -> "KeyboardShortcut":
        """Parse ``"Ctrl+Shift+O"`` style text. ``"Ctrl++"`` means Ctrl and Plus."""
        text = sequence.strip()
        if text.endswith("++"):
            parts = text[:-2].split("+") + ["+"]
        else:
            parts = text.split("+")
        if not parts or not parts[-1]:
            raise ValueError(f"Invalid shortcut sequence: {sequence!r}")
        *mods, key = parts
        return cls(modifiers=tuple(m.strip() for m in mods), key=key.strip())

    @property
    def sequence(self) -> str:
        mods = sorted(
            set(self.modifiers),
            key=lambda m: Modifiers.ORDER.index(m) if m in Modifiers.ORDER else len(Modifiers.ORDER),
        )
        return "+".join([*mods, self.key])

    def __str__(self) -> str:
        return self.sequence


ORGANIZE_WINDOWS = KeyboardShortcut((Modifiers.CTRL, Modifiers.SHIFT), "O")
RESET_MEMORY = KeyboardShortcut((Modifiers.CTRL, Modifiers.SHIFT), "R")
ZOOM_IN = KeyboardShortcut((Modifiers.CTRL,), "+")
ZOOM_OUT = KeyboardShortcut((Modifiers.CTRL,), "-")
ZOOM_RESET = KeyboardShortcut((Modifiers.CTRL,), "0")


@dataclass(frozen=True)
class ShortcutEntry:
    shortcut_id: str
    shortcut: KeyboardShortcut
    description: str
    category: str = "General"

    @property
    def sequence(self) -> str:
        return self.shortcut.sequence


class ShortcutRegistry:
    def __init__(self) -> None:
        self._entries: Dict[str, ShortcutEntry] = {}

    def register(
        self,
        shortcut_id: str,
        shortcut: KeyboardShortcut | str,
        description: str,
        category: str = "General",
    ) -> bool:
        """Register a shortcut. Returns False if the id already exists."""
        if shortcut_id in self._entries:
            return False
        if isinstance(shortcut, str):
            shortcut = KeyboardShortcut.parse(shortcut)
        self._entries[shortcut_id] = ShortcutEntry(shortcut_id, shortcut, description, category)
        return True

    def get(self, shortcut_id: str) -> Optional[ShortcutEntry]:
        return self._entries.get(shortcut_id)

    def list(self) -> List[ShortcutEntry]:
        return list(self._entries.values())

    def by_category(self) -> Dict[str, List[ShortcutEntry]]:
        buckets: Dict[str, List[ShortcutEntry]] = {}
        for e in self._entries.values():
            buckets.setdefault(e.category, []).append(e)
        for lst in buckets.values():
            lst.sort(key=lambda x: x.sequence)
        return buckets

    def find_conflicts(self) -> Dict[str, List[ShortcutEntry]]:
        """Return sequence -> entries for sequences bound more than once (case-insensitive)."""
        seq_map: Dict[str, List[ShortcutEntry]] = {}
        for e in self._entries.values():
            seq_map.setdefault(e.sequence.upper(), []).append(e)
        return {k: v for k, v in seq_map.items() if len(v) > 1}


def register_default_shortcuts(registry: ShortcutRegistry) -> None:
    registry.register("windows.organize", ORGANIZE_WINDOWS, "Organize windows", "Windows")
    registry.register("memory.reset", RESET_MEMORY, "Reset gallery memory", "Windows")
    registry.register("zoom.in", ZOOM_IN, "Zoom in", "View")
    registry.register("zoom.out", ZOOM_OUT, "Zoom out", "View")
    registry.register("zoom.reset", ZOOM_RESET, "Reset zoom", "View")

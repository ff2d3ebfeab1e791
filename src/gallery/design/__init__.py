"""Layout rules shared by the orchestrator and the Qt host."""

from .responsive import LayoutMode, classify_width, is_compact_display  # noqa: F401

__all__ = ["LayoutMode", "classify_width", "is_compact_display"]

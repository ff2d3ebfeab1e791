"""Testing utilities for headless verification of the gallery.

Nothing here imports PyQt6; the recording surface stands in for the Qt host
so the orchestrator and the panels can be driven frame by frame in tests.
"""

from __future__ import annotations

from .recording_surface import Call, RecordingSurface  # noqa: F401

__all__ = ["Call", "RecordingSurface"]

"""Global configuration and constants for the panel gallery."""

from __future__ import annotations

import os
from typing import Final

APP_NAME: Final = "Panel Gallery"
PROJECT_URL: Final = "https://github.com/panel-gallery/panel-gallery"
DATA_DIR: Final = os.environ.get("PANEL_GALLERY_DATA_DIR", "data")
LOG_LEVEL: Final = os.environ.get("PANEL_GALLERY_LOG_LEVEL", "INFO")
LOG_FORMAT: Final = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Viewports narrower than this (logical pixels) use the compact layout
COMPACT_MAX_WIDTH: Final = int(os.environ.get("PANEL_GALLERY_COMPACT_MAX_WIDTH", "550"))

# Delay between an input event and the frame that reacts to it
FRAME_INTERVAL_MS: Final = 16

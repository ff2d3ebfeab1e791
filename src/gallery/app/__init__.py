"""Application bootstrap and host config persistence."""

from .bootstrap import AppContext, create_app  # noqa: F401
from .config_store import AppConfig, load_config, save_config  # noqa: F401

__all__ = ["AppContext", "create_app", "AppConfig", "load_config", "save_config"]

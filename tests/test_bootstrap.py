import pytest

from gallery.app.bootstrap import AppContext, create_app
from gallery.app.config_store import AppConfig, save_config
from gallery.services.event_bus import EventBus
from gallery.services.logging_service import LoggingService
from gallery.services.settings_service import SettingsService
from gallery.services.shortcut_registry import ShortcutRegistry


@pytest.fixture
def headless_ctx(tmp_path):
    ctx = create_app(headless=True, data_dir=str(tmp_path), log_level="WARNING")
    yield ctx
    ctx.logging_service.detach_root()


def test_headless_bootstrap_registers_core_services(headless_ctx, tmp_path):
    ctx = headless_ctx
    assert isinstance(ctx, AppContext)
    assert ctx.qt_app is None and ctx.headless
    assert ctx.data_dir == str(tmp_path)
    for key in ("settings", "app_config", "event_bus", "logging_service", "shortcut_registry"):
        assert ctx.services.describe()[key] == "bootstrap"
    assert isinstance(ctx.event_bus, EventBus)
    assert isinstance(ctx.settings, SettingsService)
    assert isinstance(ctx.services.get("shortcut_registry"), ShortcutRegistry)
    assert ctx.logging_service.attached
    assert ctx.window_state.path.startswith(str(tmp_path))
    assert ctx.metadata["log_level"] == "WARNING"


def test_bootstrap_loads_app_config(tmp_path):
    save_config(AppConfig(zoom_factor=1.5), tmp_path)
    ctx = create_app(headless=True, data_dir=str(tmp_path))
    try:
        assert ctx.app_config.zoom_factor == 1.5
        assert ctx.services.get("app_config") is ctx.app_config
    finally:
        ctx.logging_service.detach_root()


def test_repeated_bootstrap_gets_fresh_bus(tmp_path):
    first = create_app(headless=True, data_dir=str(tmp_path))
    first_bus = first.event_bus
    first_log = first.logging_service
    second = create_app(headless=True, data_dir=str(tmp_path))
    try:
        assert second.event_bus is not first_bus
        assert second.logging_service is first_log
    finally:
        second.logging_service.detach_root()


def test_custom_settings_are_registered(tmp_path):
    custom = SettingsService(compact_max_width=900, persist_window_state=False)
    ctx = create_app(headless=True, data_dir=str(tmp_path), settings_service=custom)
    try:
        assert ctx.settings is custom
    finally:
        ctx.logging_service.detach_root()


def test_startup_logged_to_ring_buffer(headless_ctx):
    assert isinstance(headless_ctx.logging_service, LoggingService)
    # bootstrap logs at INFO; with WARNING level nothing from bootstrap is kept
    assert not headless_ctx.logging_service.filter(name_contains="gallery.app.bootstrap")

from gallery.design.responsive import Breakpoint, LayoutMode, classify_width, is_compact_display
from gallery.services.service_locator import services
from gallery.services.settings_service import SettingsService
from gallery.testing import RecordingSurface


def test_boundary_is_exclusive():
    assert classify_width(549.9, compact_max_width=550) is LayoutMode.COMPACT
    assert classify_width(550, compact_max_width=550) is LayoutMode.EXPANDED


def test_default_threshold_from_settings():
    assert SettingsService.instance.compact_max_width == 550
    assert is_compact_display(RecordingSurface(width=320.0))
    assert not is_compact_display(RecordingSurface(width=1024.0))


def test_registered_settings_override_default():
    services.register("settings", SettingsService(compact_max_width=1100))
    assert is_compact_display(RecordingSurface(width=1024.0))


def test_open_breakpoint_matches_everything():
    assert Breakpoint(LayoutMode.EXPANDED, None).is_within(10_000)

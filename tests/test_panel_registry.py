import logging

import pytest

from gallery.components.panel import DemoPanel, Panel
from gallery.testing import RecordingSurface
from gallery.views.panel_registry import (
    GALLERY_PANEL_NAME,
    DuplicatePanelName,
    PanelRegistry,
    set_open,
)


class _Dummy(DemoPanel):
    def __init__(self, name, log=None):
        self.name = name
        self._log = log if log is not None else []

    def ui(self, surface):
        self._log.append(self.name)
        surface.label(f"body of {self.name}")


def _registry(*names, log=None):
    return PanelRegistry([_Dummy(n, log) for n in names])


def test_fresh_registry_opens_gallery_even_when_absent():
    reg = _registry("A", "B")
    assert reg.open == {GALLERY_PANEL_NAME}
    assert GALLERY_PANEL_NAME == "Widget Gallery"
    assert GALLERY_PANEL_NAME not in reg.names()


def test_empty_registry_is_valid():
    reg = PanelRegistry([])
    assert len(reg) == 0
    assert reg.open == {GALLERY_PANEL_NAME}
    surface = RecordingSurface()
    surface.begin_frame()
    reg.render_toggles(surface)
    reg.render_open_panels(surface)
    assert surface.calls == []


def test_duplicate_names_rejected():
    with pytest.raises(DuplicatePanelName) as info:
        _registry("A", "B", "A")
    assert info.value.name == "A"
    assert isinstance(info.value, ValueError)


def test_set_open_round_trip_restores_prior_set():
    reg = _registry("A", "B")
    before = set(reg.open)
    reg.set_open("A", True)
    assert reg.is_open("A")
    reg.set_open("A", False)
    assert reg.open == before


def test_set_open_is_idempotent_and_tolerates_unknown_names():
    names = {"x"}
    set_open(names, "x", True)
    set_open(names, "ghost", False)
    assert names == {"x"}


def test_toggle_sequence_leaves_only_last_opened():
    reg = _registry("A", "B")
    reg.set_open(GALLERY_PANEL_NAME, False)
    reg.set_open("A", True)
    reg.set_open("B", True)
    reg.set_open("A", False)
    assert reg.open == {"B"}


def test_render_toggles_idempotent_without_interaction():
    reg = _registry("A", "B", "C")
    reg.set_open("B", True)
    before = set(reg.open)
    surface = RecordingSurface()
    for _ in range(3):
        surface.begin_frame()
        reg.render_toggles(surface)
    assert reg.open == before
    assert surface.toggles() == [("A", False), ("B", True), ("C", False)]


def test_render_toggles_applies_click():
    reg = _registry("A", "B")
    surface = RecordingSurface().click("B")
    surface.begin_frame()
    reg.render_toggles(surface)
    assert reg.is_open("B")
    surface.click("B").begin_frame()
    reg.render_toggles(surface)
    assert not reg.is_open("B")


def test_render_open_panels_follows_registration_order():
    log = []
    reg = _registry("C", "A", "B", log=log)
    for name in ("B", "C", "A"):
        reg.set_open(name, True)
    surface = RecordingSurface()
    surface.begin_frame()
    reg.render_open_panels(surface)
    assert log == ["C", "A", "B"]
    assert surface.window_titles() == ["C", "A", "B"]


def test_closed_window_is_removed_from_open_set():
    reg = _registry("A", "B")
    reg.set_open("A", True)
    surface = RecordingSurface().close_window("A")
    surface.begin_frame()
    reg.render_open_panels(surface)
    assert not reg.is_open("A")
    # Stale gallery name survives rendering untouched
    assert reg.is_open(GALLERY_PANEL_NAME)


def test_restore_keeps_stale_names_by_default(caplog):
    reg = _registry("A")
    with caplog.at_level(logging.DEBUG, logger="gallery.views.panel_registry"):
        reg.restore({"open": ["A", "Removed Demo"]})
    assert reg.open == {"A", "Removed Demo"}
    assert reg.stale_names() == ["Removed Demo"]
    assert "Removed Demo" in caplog.text


def test_restore_prunes_when_asked():
    reg = _registry("A")
    reg.restore({"open": ["A", "Removed Demo"]}, prune_stale=True)
    assert reg.open == {"A"}


def test_restore_ignores_malformed_record():
    reg = _registry("A")
    reg.set_open("A", True)
    reg.restore({"open": "A"})
    reg.restore({})
    assert reg.open == {"A", GALLERY_PANEL_NAME}


def test_to_dict_is_sorted():
    reg = _registry("B", "A")
    reg.set_open("B", True)
    reg.set_open("A", True)
    assert reg.to_dict() == {"open": ["A", "B", GALLERY_PANEL_NAME]}


def test_demo_panel_satisfies_panel_protocol():
    assert isinstance(_Dummy("x"), Panel)

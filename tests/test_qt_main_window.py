import json

import pytest

try:  # Lazy / optional Qt import
    from PyQt6.QtWidgets import QApplication, QMdiSubWindow, QToolButton
except ImportError:  # pragma: no cover
    QApplication = None  # type: ignore

pytestmark = pytest.mark.skipif(QApplication is None, reason="PyQt6 not available")


@pytest.fixture
def main_window(qtbot, tmp_path):
    from gallery.app.bootstrap import create_app
    from gallery.views.main_window import MainWindow

    ctx = create_app(headless=False, data_dir=str(tmp_path), log_level="WARNING")
    win = MainWindow(ctx)
    qtbot.addWidget(win)
    win.resize(1280, 800)
    win.show()
    win.run_frame()
    yield win
    ctx.logging_service.detach_root()


def _subwindow(win, title):
    for sub in win.findChildren(QMdiSubWindow):
        if sub.windowTitle() == title:
            return sub
    return None


def _toggle(win, text):
    for button in win.findChildren(QToolButton):
        if button.text() == text and button.isVisible():
            return button
    raise AssertionError(f"no visible toggle {text!r}")


def test_first_frame_builds_side_panel_and_windows(main_window):
    assert main_window.frames_run == 1
    assert _toggle(main_window, "Plot").isChecked() is False
    assert _toggle(main_window, "Widget Gallery").isChecked() is True
    gallery = _subwindow(main_window, "Widget Gallery")
    assert gallery is not None and gallery.isVisible()
    menus = [a.text() for a in main_window.menuBar().actions() if a.isVisible()]
    assert "File" in menus


def test_toggle_click_opens_window_on_next_frame(main_window):
    _toggle(main_window, "Plot").click()
    main_window.run_frame()
    assert main_window.windows.data.demos.is_open("Plot")
    assert _subwindow(main_window, "Plot").isVisible()


def test_closing_subwindow_closes_panel(main_window):
    _subwindow(main_window, "Widget Gallery").close()
    main_window.run_frame()
    main_window.run_frame()
    assert not main_window.windows.data.demos.is_open("Widget Gallery")
    assert _toggle(main_window, "Widget Gallery").isChecked() is False


def test_shortcut_organizes_windows(main_window):
    events = []
    main_window._ctx.event_bus.subscribe("windows_organized", events.append)
    main_window.surface._on_shortcut("Ctrl+Shift+O")
    main_window.run_frame()
    assert len(events) == 1


def test_shortcut_pressed_while_compact_is_dropped(main_window):
    events = []
    main_window._ctx.event_bus.subscribe("windows_organized", events.append)
    main_window.resize(400, 700)
    main_window.run_frame()
    main_window.surface._on_shortcut("Ctrl+Shift+O")
    main_window.run_frame()
    main_window.resize(1280, 800)
    main_window.run_frame()
    assert not main_window.windows.is_compact(main_window.surface)
    assert events == []


def test_toggle_reopens_window_after_close_and_toggle_off(main_window):
    _subwindow(main_window, "Widget Gallery").close()
    _toggle(main_window, "Widget Gallery").click()
    main_window.run_frame()
    assert not main_window.windows.data.demos.is_open("Widget Gallery")
    _toggle(main_window, "Widget Gallery").click()
    main_window.run_frame()
    assert main_window.windows.data.demos.is_open("Widget Gallery")
    assert _toggle(main_window, "Widget Gallery").isChecked() is True


def test_about_dismissed_hint_shown_once(main_window):
    from gallery.views.demo_windows import DEMO_MENU_LABEL

    bus = main_window._ctx.event_bus
    bus.publish("about_dismissed")
    assert DEMO_MENU_LABEL in main_window.statusBar().currentMessage()
    main_window.statusBar().clearMessage()
    bus.publish("about_dismissed")
    assert main_window.statusBar().currentMessage() == ""


def test_zoom_scales_host_font(main_window):
    base = main_window.font().pointSizeF()
    main_window.surface.zoom_factor = 2.0
    assert main_window.font().pointSizeF() == pytest.approx(base * 2.0)


def test_compact_layout_when_narrow(main_window):
    main_window.resize(400, 700)
    main_window.run_frame()
    assert main_window.windows.is_compact(main_window.surface)
    about = _subwindow(main_window, "About Panel Gallery")
    assert about is not None and about.isVisible()
    assert not _subwindow(main_window, "Widget Gallery").isVisible()


def test_close_persists_state(main_window, tmp_path):
    _toggle(main_window, "Table").click()
    main_window.run_frame()
    main_window.close()
    record = json.loads((tmp_path / "demo_windows.json").read_text(encoding="utf-8"))
    assert "Table" in record["demos"]["open"]
    assert (tmp_path / "app_state.json").exists()

# Shared fixtures. Qt runs on the offscreen platform; a minimal 'qtbot'
# stands in when pytest-qt is not installed. If pytest-qt is present its
# fixture wins.

import contextlib
import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gallery.services.service_locator import services  # noqa: E402
from gallery.services.settings_service import SettingsService  # noqa: E402
from gallery.testing import RecordingSurface  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture(autouse=True)
def _isolated_services():
    """Each test starts with an empty service locator and default settings."""
    services.clear()
    saved = SettingsService.instance
    SettingsService.instance = SettingsService()
    yield
    services.clear()
    SettingsService.instance = saved


@pytest.fixture
def wide_surface():
    return RecordingSurface(width=1280.0, height=800.0)


@pytest.fixture
def narrow_surface():
    return RecordingSurface(width=400.0, height=800.0, available_height=760.0)

"""Command line entry point for ``python -m gallery``.

Without ``--headless-frames`` the Qt window is opened. With it, the given
number of frames is run against a ``RecordingSurface`` and a JSON summary is
printed; useful as a smoke check on machines without a display.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Callable, Dict

from config import settings

from gallery.app.bootstrap import AppContext, create_app
from gallery.components.surface import Surface
from gallery.design.responsive import is_compact_display
from gallery.testing.recording_surface import RecordingSurface
from gallery.views.demo_windows import DemoWindows

__all__ = ["build_parser", "run_headless", "main"]

_log = logging.getLogger(__name__)


def _always_compact(_surface: Surface) -> bool:
    return True


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="panel-gallery", description=f"{settings.APP_NAME} demo shell")
    p.add_argument("--data-dir", default=None, help="Directory for persisted window state")
    p.add_argument(
        "--compact", action="store_true", help="Force the compact (small screen) layout"
    )
    p.add_argument(
        "--reset-state", action="store_true", help="Forget which windows were open last time"
    )
    p.add_argument("--log-level", default=None, help="Console log level (DEBUG, INFO, ...)")
    p.add_argument(
        "--headless-frames",
        type=int,
        default=None,
        metavar="N",
        help="Run N frames without a display and print a JSON summary",
    )
    return p


def run_headless(ctx: AppContext, frames: int, *, compact: bool = False) -> Dict[str, Any]:
    predicate: Callable[[Surface], bool] = _always_compact if compact else is_compact_display
    windows = DemoWindows(compact_predicate=predicate)
    runtime = ctx.settings
    bus = ctx.event_bus
    bus.enable_tracing()
    restored = False
    if runtime.persist_window_state:
        restored = ctx.window_state.load(windows, prune_stale=runtime.prune_stale_on_load)
    surface = RecordingSurface()
    for _ in range(frames):
        surface.run_frame(windows.ui)
    if runtime.persist_window_state:
        ctx.window_state.save(windows)
    data = windows.data
    return {
        "frames": frames,
        "layout": "compact" if windows.is_compact(surface) else "expanded",
        "restored": restored,
        "about_is_open": windows.about_is_open,
        "open_windows": surface.window_titles(),
        "open_demos": data.demos.open_names(),
        "open_tests": data.tests.open_names(),
        "warnings": len(ctx.logging_service.filter(level="WARNING")),
        "events": [entry.name for entry in bus.recent_trace_entries()],
        "handler_errors": len(bus.errors),
        "services": ctx.services.describe(),
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.headless_frames is not None and args.headless_frames < 0:
        parser.error("--headless-frames must be >= 0")
    headless = args.headless_frames is not None

    ctx = create_app(headless=headless, data_dir=args.data_dir, log_level=args.log_level)
    if args.reset_state and ctx.window_state.reset():
        _log.info("Removed persisted window state %s", ctx.window_state.path)

    if headless:
        summary = run_headless(ctx, args.headless_frames, compact=args.compact)
        print(json.dumps(summary, indent=2, ensure_ascii=False))  # noqa: T201
        return 0

    from gallery.views.main_window import MainWindow  # Qt only needed for the window

    win = MainWindow(
        ctx, compact_predicate=_always_compact if args.compact else is_compact_display
    )
    win.show()
    return ctx.qt_app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Module entrypoint for `python -m gallery`.

Delegates to `gallery.launcher.main`.
"""

from __future__ import annotations

from . import launcher as _launcher


def main() -> int:  # pragma: no cover - runtime delegation
    return _launcher.main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

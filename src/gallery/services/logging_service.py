"""Logging setup and in-process log capture.

``configure_logging`` installs the console format used by the launcher.
``LoggingService`` keeps the most recent records in a bounded ring buffer so
the headless runner and tests can inspect what the orchestrator reported
without scraping stderr.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from threading import RLock
from typing import Deque, List, Optional

from config import settings

from .service_locator import services

__all__ = [
    "LogEntry",
    "LoggingService",
    "configure_logging",
    "get_logging_service",
]


def configure_logging(level: str | int | None = None) -> int:
    """Install the gallery console format on the root logger.

    Returns the numeric level that was applied. Unknown level names fall back
    to INFO.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            numeric = logging.INFO
    else:
        numeric = level
    logging.basicConfig(level=numeric, format=settings.LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__(level=logging.DEBUG)
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(self, capacity: int = 500) -> None:
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._attached = False

    # Lifecycle --------------------------------------------------------
    def attach_root(self) -> None:
        if self._attached:
            return
        logging.getLogger().addHandler(self._handler)
        self._attached = True

    def detach_root(self) -> None:
        if not self._attached:
            return
        logging.getLogger().removeHandler(self._handler)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
        )
        with self._lock:
            self._entries.append(entry)

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def get_logging_service() -> LoggingService:
    return services.get_typed("logging_service", LoggingService)

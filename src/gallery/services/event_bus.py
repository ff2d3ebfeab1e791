"""Synchronous publish/subscribe bus for gallery-level notifications.

The orchestrator publishes coarse lifecycle events (about dismissed, windows
organized, memory reset, zoom changed, state restored) so the Qt host and
diagnostics can react without the core importing them.

Handlers run on the publishing thread. A failing handler is recorded in
``errors`` and never interrupts the publish cycle.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Deque, Dict, List, Protocol, Tuple

__all__ = [
    "GalleryEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
    "TraceEntry",
]


class GalleryEvent(str, Enum):
    STARTUP_COMPLETE = "startup_complete"
    ABOUT_DISMISSED = "about_dismissed"
    WINDOWS_ORGANIZED = "windows_organized"
    MEMORY_RESET = "memory_reset"
    ZOOM_CHANGED = "zoom_changed"
    STATE_RESTORED = "state_restored"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


@dataclass(frozen=True)
class TraceEntry:
    name: str
    timestamp: float
    summary: str


def _key(name: str | GalleryEvent) -> str:
    return name.value if isinstance(name, GalleryEvent) else name


class EventBus:
    """Synchronous event dispatcher with optional tracing.

    Subscribers are snapshotted under the lock and invoked without it, so a
    handler may subscribe or unsubscribe while being dispatched.
    """

    DEFAULT_TRACE_CAPACITY = 50

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []
        self._tracing_enabled: bool = False
        self._traces: Deque[Tuple[str, float, str]] = deque(maxlen=self.DEFAULT_TRACE_CAPACITY)

    # Subscription management -------------------------------------------
    def subscribe(
        self, name: str | GalleryEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket and sub in bucket:
                bucket.remove(sub)
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing ----------------------------------------------------------
    def publish(self, name: str | GalleryEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
            if self._tracing_enabled:
                text = "-" if payload is None else str(payload)
                summary = text if len(text) <= 40 else text[:37] + "..."
                self._traces.append((evt.name, evt.timestamp, summary))
        finished: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    # Introspection ------------------------------------------------------
    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)

    # Tracing ------------------------------------------------------------
    def enable_tracing(self, enabled: bool = True, *, capacity: int | None = None) -> None:
        with self._lock:
            self._tracing_enabled = enabled
            if capacity is not None and capacity != self._traces.maxlen:
                self._traces = deque(self._traces, maxlen=capacity)

    def recent_trace_entries(self) -> list[TraceEntry]:
        with self._lock:
            return [TraceEntry(name=n, timestamp=ts, summary=s) for (n, ts, s) in self._traces]

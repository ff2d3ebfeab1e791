"""Service locator for gallery-wide singletons.

Bootstrap registers the shared objects here (settings, app config, event bus,
logging service, shortcut registry) so views and demo panels can look them
up without threading references through every constructor:

    bus = services.try_get("event_bus")

Panels use ``try_get`` and carry on without the service when it is missing,
so a ``DemoWindows`` driven by a bare ``RecordingSurface`` needs no bootstrap.
Each entry remembers who registered it; ``describe()`` reports that mapping
for the headless smoke summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """A key was registered twice without ``allow_override``."""


class ServiceNotFoundError(KeyError):
    pass


@dataclass
class ServiceRecord:
    value: Any
    origin: str


class ServiceLocator:
    def __init__(self) -> None:
        self._lock = RLock()
        self._services: Dict[str, ServiceRecord] = {}

    def register(
        self, key: str, value: Any, *, allow_override: bool = False, origin: str = "unknown"
    ) -> None:
        """Register ``value`` under ``key``.

        Re-bootstrapping replaces the previous app's services, so bootstrap
        passes ``allow_override=True``; anywhere else a second registration
        is a wiring mistake and raises.
        """
        with self._lock:
            if key in self._services and not allow_override:
                raise ServiceAlreadyRegisteredError(
                    f"Service '{key}' already registered by {self._services[key].origin}"
                )
            self._services[key] = ServiceRecord(value=value, origin=origin)

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._services:
                raise ServiceNotFoundError(key)
            return self._services[key].value

    def get_typed(self, key: str, expected_type: Type[T]) -> T:
        value = self.get(key)
        if not isinstance(value, expected_type):
            raise TypeError(
                f"Service '{key}' is a {type(value).__name__}, not {expected_type.__name__}"
            )
        return value

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            record = self._services.get(key)
        return default if record is None else record.value

    def describe(self) -> Dict[str, str]:
        """Registered keys mapped to the origin that registered them, sorted by key."""
        with self._lock:
            return {key: self._services[key].origin for key in sorted(self._services)}

    def clear(self) -> None:
        with self._lock:
            self._services.clear()


services = ServiceLocator()

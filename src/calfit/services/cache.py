"""Process-local caching for slow-changing lookups such as the food catalog."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

DEFAULT_TTL_SECONDS = 300


class Cache(Protocol):
    """Key-value cache with per-entry expiry."""

    def get(self, key: str) -> object | None:
        """Return the value stored under ``key`` unless it has expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store ``value`` for ``ttl_seconds``."""

    def delete(self, key: str) -> None:
        """Drop ``key`` so the next read goes back to the source."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _Slot:
    value: object
    stale_at: datetime


@dataclass
class InMemoryCache(Cache):
    """Dictionary-backed cache; entries are evicted lazily on read."""

    clock: Callable[[], datetime] = _utcnow
    _slots: dict[str, _Slot] = field(default_factory=dict, repr=False)

    def get(self, key: str) -> object | None:
        slot = self._slots.get(key)
        if slot is None:
            return None
        if self.clock() >= slot.stale_at:
            del self._slots[key]
            return None
        return slot.value

    def set(
        self, key: str, value: object, ttl_seconds: int = DEFAULT_TTL_SECONDS
    ) -> None:
        self._slots[key] = _Slot(
            value=value, stale_at=self.clock() + timedelta(seconds=ttl_seconds)
        )

    def delete(self, key: str) -> None:
        self._slots.pop(key, None)

    def clear(self) -> None:
        """Forget every entry."""
        self._slots.clear()

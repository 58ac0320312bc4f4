from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from nexjob.schemas.settings import SiteSettings


@dataclass(frozen=True)
class CachedSettings:
    data: SiteSettings
    timestamp: float


class SettingsCache:
    """Single-slot, process-local cache for the active settings snapshot.

    The entry is swapped by reference and never mutated, so concurrent
    readers always see a complete snapshot.
    """

    def __init__(self, ttl_seconds: float = 120.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: CachedSettings | None = None

    def get(self) -> SiteSettings | None:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self.ttl_seconds:
            return None
        return entry.data

    def get_stale(self) -> SiteSettings | None:
        entry = self._entry
        return entry.data if entry is not None else None

    def set(self, data: SiteSettings) -> None:
        self._entry = CachedSettings(data=data, timestamp=self._clock())

    def clear(self) -> None:
        self._entry = None

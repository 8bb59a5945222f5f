from __future__ import annotations

import logging
import threading
import time
import typing as t
from dataclasses import dataclass

from ..errors import KeyNotFoundError
from ..monitoring import metrics
from .base import TTL, Cache, ttl_to_seconds

_logger = logging.getLogger(__name__)

Clock = t.Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    value: t.Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class LocalCache(Cache):
    """In-process TTL cache guarded by a single lock.

    Expiry is lazy: a stale entry is dropped when its key is next touched,
    or by ``purge_expired``. Values are stored and returned as-is.

    ``clock`` must be monotonic; it defaults to ``time.monotonic``.
    With ``metrics_enabled`` the cache records into the module-level
    counters in ``ttlcache.monitoring.metrics``, which every cache in the
    process shares.
    """

    def __init__(
        self,
        default_ttl_seconds: float = 60.0,
        *,
        clock: t.Optional[Clock] = None,
        metrics_enabled: bool = True,
    ) -> None:
        self._store: t.Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._ttl = ttl_to_seconds(default_ttl_seconds)
        self._clock = clock or time.monotonic
        self._metrics_enabled = metrics_enabled

    async def get(self, key: str) -> t.Any:
        started = time.perf_counter()
        with self._lock:
            entry = self._store.get(key)
            if entry is not None and entry.is_expired(self._clock()):
                del self._store[key]
                entry = None
        self._record("get", "hit" if entry is not None else "miss", started)
        if entry is None:
            raise KeyNotFoundError(key)
        return entry.value

    async def set(self, key: str, value: t.Any, ttl_seconds: t.Optional[TTL] = None) -> None:
        started = time.perf_counter()
        ttl = self._ttl if ttl_seconds is None else ttl_to_seconds(ttl_seconds)
        with self._lock:
            # value and expiry are swapped in together
            self._store[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)
        _logger.debug("cache set key=%s ttl=%.3fs", key, ttl)
        self._record("set", "ok", started)

    async def delete(self, key: str) -> None:
        started = time.perf_counter()
        with self._lock:
            removed = self._store.pop(key, None) is not None
        _logger.debug("cache delete key=%s removed=%s", key, removed)
        self._record("delete", "ok", started)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            stale = [key for key, entry in self._store.items() if entry.is_expired(now)]
            for key in stale:
                del self._store[key]
        if stale:
            _logger.debug("cache purged %d expired entries", len(stale))
            if self._metrics_enabled:
                metrics.cache_purged_total.inc(len(stale))
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._store.get(key)  # type: ignore[arg-type]
            return entry is not None and not entry.is_expired(self._clock())

    def _record(self, op: str, result: str, started: float) -> None:
        if not self._metrics_enabled:
            return
        metrics.cache_requests_total.inc(op=op, result=result)
        metrics.cache_operation_latency_seconds.observe(time.perf_counter() - started, op=op)

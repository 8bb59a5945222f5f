"""ttlcache

A process-local, in-memory key/value cache with per-entry TTL expiration.
Expiry is lazy; an optional ``ExpiryReaper`` reclaims memory in the
background.
"""

from __future__ import annotations

import typing as t

from .cache import Cache, CacheEntry, ExpiryReaper, LocalCache
from .cache.local_cache import Clock
from .errors import CacheError, KeyNotFoundError
from .utils import CacheConfig, ReaperConfig, TTLCacheConfig


def create_cache(config: t.Optional[CacheConfig] = None, *, clock: t.Optional[Clock] = None) -> LocalCache:
    """Build a new, independent ``LocalCache`` from ``config``."""
    config = config or CacheConfig()
    return LocalCache(
        default_ttl_seconds=config.default_ttl_seconds,
        clock=clock,
        metrics_enabled=config.metrics_enabled,
    )


def create_reaper(cache: LocalCache, config: t.Optional[ReaperConfig] = None) -> t.Optional[ExpiryReaper]:
    """Return a reaper for ``cache``, or ``None`` when reaping is disabled."""
    config = config or ReaperConfig()
    if not config.enabled:
        return None
    return ExpiryReaper(cache, interval_seconds=config.interval_seconds)


__all__ = [
    "Cache",
    "LocalCache",
    "CacheEntry",
    "ExpiryReaper",
    "CacheError",
    "KeyNotFoundError",
    "CacheConfig",
    "ReaperConfig",
    "TTLCacheConfig",
    "create_cache",
    "create_reaper",
]

__version__ = "0.1.0"

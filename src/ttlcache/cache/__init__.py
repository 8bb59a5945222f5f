from .base import Cache
from .local_cache import CacheEntry, LocalCache
from .reaper import ExpiryReaper

__all__ = ["Cache", "LocalCache", "CacheEntry", "ExpiryReaper"]

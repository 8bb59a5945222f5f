"""Configuration for ttlcache."""

from .config import CacheConfig, ReaperConfig, TTLCacheConfig

__all__ = [
    "CacheConfig",
    "ReaperConfig",
    "TTLCacheConfig",
]

from __future__ import annotations


class CacheError(Exception):
    """Base class for errors raised by ttlcache."""


class KeyNotFoundError(CacheError, KeyError):
    """No live value exists for the key right now.

    Raised for keys that were never set, were deleted, or whose TTL elapsed;
    the three cases are not distinguished.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"cache: key not found: {self.key!r}"

from __future__ import annotations

import math
import typing as t
from abc import ABC, abstractmethod
from datetime import timedelta

from ..errors import KeyNotFoundError

TTL = t.Union[float, int, timedelta]


class Cache(ABC):
    """Key/value cache with per-entry expiration.

    Operations are coroutines so remote backings can implement the same
    interface. A miss is reported by raising ``KeyNotFoundError``.
    """

    @abstractmethod
    async def get(self, key: str) -> t.Any:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: t.Any, ttl_seconds: t.Optional[TTL] = None) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    async def delete(self, key: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    async def get_or_default(self, key: str, default: t.Any = None) -> t.Any:
        try:
            return await self.get(key)
        except KeyNotFoundError:
            return default


def ttl_to_seconds(ttl: TTL) -> float:
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    elif isinstance(ttl, (int, float)) and not isinstance(ttl, bool):
        seconds = float(ttl)
    else:
        raise TypeError(f"ttl must be seconds or a timedelta, got {type(ttl).__name__}")
    if math.isnan(seconds):
        raise ValueError("ttl must not be NaN")
    return seconds

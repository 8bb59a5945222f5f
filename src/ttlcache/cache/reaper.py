from __future__ import annotations

import logging

import anyio
from anyio.abc import TaskStatus

from .local_cache import LocalCache

_logger = logging.getLogger(__name__)


class ExpiryReaper:
    """Periodically drops expired entries from a ``LocalCache``.

    Only reclaims memory; lookups already treat expired entries as absent.
    Run it inside a task group::

        async with anyio.create_task_group() as tg:
            await tg.start(reaper.run)
            ...
            tg.cancel_scope.cancel()
    """

    def __init__(self, cache: LocalCache, interval_seconds: float = 30.0) -> None:
        if not interval_seconds > 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")
        self._cache = cache
        self._interval = interval_seconds

    @property
    def interval_seconds(self) -> float:
        return self._interval

    async def sweep_once(self) -> int:
        removed = self._cache.purge_expired()
        if removed:
            _logger.debug("reaper removed %d expired entries", removed)
        return removed

    async def run(self, *, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
        task_status.started()
        while True:
            await anyio.sleep(self._interval)
            await self.sweep_once()

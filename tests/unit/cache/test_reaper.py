"""Unit tests for ExpiryReaper."""

import anyio
import pytest

from ttlcache.cache.local_cache import LocalCache
from ttlcache.cache.reaper import ExpiryReaper
from ttlcache.errors import KeyNotFoundError
from ttlcache.monitoring import metrics


class TestExpiryReaperConfig:
    """Test ExpiryReaper construction."""

    def test_rejects_non_positive_interval(self, cache):
        """Test a zero or negative interval is refused."""
        with pytest.raises(ValueError):
            ExpiryReaper(cache, interval_seconds=0)
        with pytest.raises(ValueError):
            ExpiryReaper(cache, interval_seconds=-1)
        with pytest.raises(ValueError):
            ExpiryReaper(cache, interval_seconds=float("nan"))

    def test_interval_property(self, cache):
        """Test the configured interval is exposed."""
        assert ExpiryReaper(cache, interval_seconds=5).interval_seconds == 5


@pytest.mark.asyncio
class TestExpiryReaper:
    """Test ExpiryReaper sweeps."""

    async def test_sweep_once_removes_expired(self, cache, clock):
        """Test a single sweep drops expired entries and keeps live ones."""
        await cache.set("stale", "v", 1)
        await cache.set("live", "v", 100)
        clock.advance(10)

        reaper = ExpiryReaper(cache, interval_seconds=1)
        removed = await reaper.sweep_once()

        assert removed == 1
        assert len(cache) == 1
        assert await cache.get("live") == "v"
        assert metrics.cache_purged_total.value() == 1

    async def test_sweep_does_not_change_lookups(self, cache, clock):
        """Test reaping is invisible to get/set/delete."""
        await cache.set("k", "v", 1)
        clock.advance(1)

        await ExpiryReaper(cache, interval_seconds=1).sweep_once()

        with pytest.raises(KeyNotFoundError):
            await cache.get("k")
        await cache.delete("k")

    async def test_run_sweeps_in_background(self, clock):
        """Test run() keeps sweeping until cancelled."""
        cache = LocalCache(clock=clock)
        reaper = ExpiryReaper(cache, interval_seconds=0.01)

        async with anyio.create_task_group() as tg:
            await tg.start(reaper.run)

            await cache.set("a", "v", 1)
            clock.advance(2)
            with anyio.fail_after(2):
                while len(cache):
                    await anyio.sleep(0.01)

            await cache.set("b", "v", 1)
            clock.advance(2)
            with anyio.fail_after(2):
                while len(cache):
                    await anyio.sleep(0.01)

            tg.cancel_scope.cancel()

        assert metrics.cache_purged_total.value() == 2

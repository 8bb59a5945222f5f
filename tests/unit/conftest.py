"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from ttlcache.cache.local_cache import LocalCache
from ttlcache.monitoring import metrics


class FakeClock:
    """Manually advanced clock for deterministic expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_metrics():
    """Isolate the module-level metrics between tests."""
    metrics.reset_all()
    yield
    metrics.reset_all()


@pytest.fixture
def clock():
    """Fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """LocalCache driven by the fake clock."""
    return LocalCache(default_ttl_seconds=60, clock=clock)

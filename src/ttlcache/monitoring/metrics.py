from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def _label_key(labels: Dict[str, Any]) -> Tuple:
    return tuple(sorted(labels.items()))


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = _label_key(labels)
        with self._lock:
            self.values[key] = self.values.get(key, 0.0) + value

    def value(self, **labels: Any) -> float:
        with self._lock:
            return self.values.get(_label_key(labels), 0.0)

    def reset(self) -> None:
        with self._lock:
            self.values.clear()


@dataclass
class Histogram:
    name: str
    help: str
    buckets: List[float]
    counts: Dict[Tuple, List[int]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def observe(self, val: float, **labels: Any) -> None:
        key = _label_key(labels)
        with self._lock:
            if key not in self.counts:
                # trailing slot counts observations above the last bucket
                self.counts[key] = [0 for _ in range(len(self.buckets) + 1)]
            for i, b in enumerate(self.buckets):
                if val <= b:
                    self.counts[key][i] += 1
                    break
            else:
                self.counts[key][-1] += 1

    def total(self, **labels: Any) -> int:
        with self._lock:
            return sum(self.counts.get(_label_key(labels), []))

    def reset(self) -> None:
        with self._lock:
            self.counts.clear()


# Predefined metrics
cache_requests_total = Counter("cache_requests_total", "Cache operations by op and result")
cache_purged_total = Counter("cache_purged_total", "Expired entries physically removed")
cache_operation_latency_seconds = Histogram(
    "cache_operation_latency_seconds",
    "Time spent inside cache operations",
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01],
)


def reset_all() -> None:
    cache_requests_total.reset()
    cache_purged_total.reset()
    cache_operation_latency_seconds.reset()

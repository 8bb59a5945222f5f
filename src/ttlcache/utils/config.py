from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CacheConfig:
    default_ttl_seconds: float = 60.0
    metrics_enabled: bool = True

    def __post_init__(self) -> None:
        if not self.default_ttl_seconds >= 0:
            raise ValueError(f"default_ttl_seconds must be >= 0, got {self.default_ttl_seconds}")


@dataclass
class ReaperConfig:
    enabled: bool = False
    interval_seconds: float = 30.0

    def __post_init__(self) -> None:
        if not self.interval_seconds > 0:
            raise ValueError(f"interval_seconds must be > 0, got {self.interval_seconds}")


@dataclass
class TTLCacheConfig:
    cache: CacheConfig = dataclasses.field(default_factory=CacheConfig)
    reaper: ReaperConfig = dataclasses.field(default_factory=ReaperConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TTLCacheConfig":
        def build(dc_cls, key):
            values = data.get(key, {})
            return dc_cls(**values)

        return cls(
            cache=build(CacheConfig, "cache"),
            reaper=build(ReaperConfig, "reaper"),
        )

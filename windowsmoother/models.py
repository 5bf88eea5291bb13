from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Sample:
    value: Any
    observed_at: float

    def age(self, now: float) -> float:
        return now - self.observed_at


@dataclass(frozen=True)
class SmoothedReading:
    channel: str
    value: float | None
    smoothed: float
    method: str
    window_seconds: float
    sample_count: int
    timestamp: float
    sequence: int

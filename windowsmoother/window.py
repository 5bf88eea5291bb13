from __future__ import annotations

import logging
import math
import time
from collections import deque
from typing import Any, Callable

from windowsmoother.config import Method
from windowsmoother.models import Sample
from windowsmoother.smoothing.base import Averager
from windowsmoother.smoothing.defaults import default_registry
from windowsmoother.smoothing.registry import AveragerRegistry

Clock = Callable[[], float]


class Smoother:
    """Not thread-safe: hold a lock around each call when sharing an instance."""

    def __init__(
        self,
        window_seconds: float,
        method: Method | str = Method.SIMPLE_AVERAGE,
        *,
        clock: Clock = time.monotonic,
        logger: logging.Logger | None = None,
        zero: Any = 0.0,
        registry: AveragerRegistry | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        if math.isnan(window_seconds) or window_seconds < 0:
            self._logger.warning(f"window_seconds={window_seconds!r} is not a valid window; using 0")
            window_seconds = 0.0
        self._window_seconds = float(window_seconds)
        self._method = Method(method)
        self._averager: Averager = (registry or default_registry()).create(self._method)
        self._clock = clock
        self._zero = zero
        self._history: deque[Sample] = deque()

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    @property
    def method(self) -> Method:
        return self._method

    @property
    def samples(self) -> tuple[Sample, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def smooth(self, value: Any) -> Any:
        """Record ``value`` and return the smoothed value including it."""
        now = self._clock()
        self._history.append(Sample(value=value, observed_at=now))
        self._evict(now)
        return self.value

    @property
    def value(self) -> Any:
        if not self._history:
            self._logger.warning("Smoothed value requested before any sample was submitted")
            return self._zero
        if len(self._history) == 1:
            return self._history[0].value
        return self._averager.average([sample.value for sample in self._history])

    def reset(self) -> None:
        self._history.clear()

    def _evict(self, now: float) -> None:
        # history is oldest-first, so the first sample inside the window ends the scan
        while self._history and self._history[0].age(now) > self._window_seconds:
            self._history.popleft()

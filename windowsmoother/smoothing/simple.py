from __future__ import annotations

from typing import Sequence, TypeVar

from windowsmoother.smoothing.base import Averager
from windowsmoother.smoothing.registry import AveragerFactory

T = TypeVar("T")


class SimpleAverage(Averager):
    def average(self, values: Sequence[T]) -> T:
        total = values[0]
        for value in values[1:]:
            total = total + value
        return total / len(values)


class SimpleAverageFactory(AveragerFactory):
    def create(self) -> Averager:
        return SimpleAverage()

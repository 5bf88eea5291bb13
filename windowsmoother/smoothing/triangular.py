from __future__ import annotations

from typing import Sequence, TypeVar

from windowsmoother.smoothing.base import Averager
from windowsmoother.smoothing.registry import AveragerFactory

T = TypeVar("T")


class TriangularWeightedAverage(Averager):
    def average(self, values: Sequence[T]) -> T:
        # weights run 1..n, oldest to newest
        total = values[0] * 1
        for weight, value in enumerate(values[1:], start=2):
            total = total + value * weight
        count = len(values)
        return total / (count * (count + 1) // 2)


class TriangularWeightedAverageFactory(AveragerFactory):
    def create(self) -> Averager:
        return TriangularWeightedAverage()

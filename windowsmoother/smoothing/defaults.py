from __future__ import annotations

from windowsmoother.config import Method
from windowsmoother.smoothing.registry import AveragerRegistry
from windowsmoother.smoothing.simple import SimpleAverageFactory
from windowsmoother.smoothing.triangular import TriangularWeightedAverageFactory


def default_registry() -> AveragerRegistry:
    registry = AveragerRegistry()
    registry.register(Method.SIMPLE_AVERAGE, SimpleAverageFactory())
    registry.register(Method.TRIANGULAR_WEIGHTED_AVERAGE, TriangularWeightedAverageFactory())
    return registry

from __future__ import annotations

from windowsmoother.config import Method
from windowsmoother.smoothing.base import Averager


class AveragerFactory:
    def create(self) -> Averager:
        raise NotImplementedError


class AveragerRegistry:
    def __init__(self) -> None:
        self._factories: dict[Method, AveragerFactory] = {}

    def register(self, method: Method | str, factory: AveragerFactory) -> None:
        self._factories[Method(method)] = factory

    def methods(self) -> list[Method]:
        return sorted(self._factories, key=lambda method: method.value)

    def create(self, method: Method | str) -> Averager:
        factory = None
        try:
            factory = self._factories.get(Method(method))
        except ValueError:
            pass
        if factory is None:
            known = ", ".join(m.value for m in self.methods()) or "<none>"
            raise ValueError(f"Unknown smoothing method '{method}'. Registered methods: {known}")
        return factory.create()

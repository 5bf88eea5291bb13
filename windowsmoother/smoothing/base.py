from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

T = TypeVar("T")


class Averager(ABC):
    @abstractmethod
    def average(self, values: Sequence[T]) -> T:
        raise NotImplementedError

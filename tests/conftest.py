import sys
from pathlib import Path

import pytest


def pytest_configure():
    repo_root = Path(__file__).resolve().parents[1]
    sp = str(repo_root)
    if sp not in sys.path:
        sys.path.insert(0, sp)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()

from typing import Iterable, List

import pytest


class ScriptedRandomSource:
    """Replays a fixed sequence of draws and records the requested ranges."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls: List[tuple] = []

    def next_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high, f"{value} outside [{low}, {high}]"
        return value


class LowestRandomSource:
    def next_int(self, low: int, high: int) -> int:
        return low


class HighestRandomSource:
    def next_int(self, low: int, high: int) -> int:
        return high


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def lowest():
    return LowestRandomSource()


@pytest.fixture
def highest():
    return HighestRandomSource()

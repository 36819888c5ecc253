import pytest


class ScriptedRandomSource:
    """Replays fixed draws and records every bound it was asked for."""

    def __init__(self, values=None):
        self.values = list(values or [])
        self.bounds: list[int] = []

    def next_index(self, bound: int) -> int:
        self.bounds.append(bound)
        if self.values:
            value = self.values.pop(0)
        else:
            value = bound - 1
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        return value


@pytest.fixture
def max_source():
    """Always draws the highest index allowed by the bound."""
    return ScriptedRandomSource()


@pytest.fixture
def zero_source():
    return ScriptedRandomSource(values=[0] * 1000)

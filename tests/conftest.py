"""Shared pytest fixtures."""

import pytest


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    """Create a fresh FakeClock starting at t=0 for each test."""
    return FakeClock()

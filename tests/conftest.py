# tests/conftest.py
import pytest


class FakeClock:
    """Manually advanced monotonic clock in nanoseconds."""

    def __init__(self, start: int = 1_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def clock():
    return FakeClock()

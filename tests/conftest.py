from __future__ import annotations

from datetime import datetime, timedelta

import pytest


class FakeClock:
    """Deterministic clock: each ``now()`` advances one second, sleeps are recorded."""

    def __init__(self, start: datetime) -> None:
        self._now = start
        self.sleeps: list[float] = []
        self.interrupt_after: int | None = None

    def now(self) -> datetime:
        current = self._now
        self._now += timedelta(seconds=1)
        return current

    def time(self) -> float:
        return float(int(self._now.timestamp()))

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if self.interrupt_after is not None and len(self.sleeps) >= self.interrupt_after:
            raise KeyboardInterrupt


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 1, 8, 30, 0))


@pytest.fixture
def clock_factory():
    """Build independent fake clocks starting at a chosen moment."""
    return FakeClock

"""Wall clock and sleep capability used by the session loop."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Protocol

from .models import TIMESTAMP_FORMAT


class Clock(Protocol):
    """Anything that can tell the time and pause the caller."""

    def now(self) -> datetime:
        ...

    def time(self) -> float:
        ...

    def sleep(self, seconds: float) -> None:
        ...


class SystemClock:
    """:class:`Clock` backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()

    def time(self) -> float:
        return time.time()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def wall_clock_seed(clock: Clock) -> int:
    """Seed derived from the wall clock at one-second resolution."""
    return int(clock.time())

"""Shared dataclasses and enums for readings and sessions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Status(str, Enum):
    """Safety classification of a distance reading."""

    INVALID = "INVALID"
    STOP = "STOP"
    CAUTION = "CAUTION"
    SAFE = "SAFE"

    def __str__(self) -> str:
        return self.value


class SessionMode(IntEnum):
    MANUAL = 1
    AUTOMATIC = 2

    @classmethod
    def from_choice(cls, choice: int) -> "SessionMode":
        """Map the operator's menu number to a mode; raises ``ValueError``."""
        return cls(choice)


@dataclass(frozen=True)
class Reading:
    # Local wall-clock time, formatted with TIMESTAMP_FORMAT.
    timestamp: str
    distance_cm: float

    def to_row(self) -> tuple[str, str]:
        """Return the CSV row for the log store (distance to 2 decimals)."""
        return self.timestamp, f"{self.distance_cm:.2f}"

"""Append-only CSV store for distance readings."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from ..core.models import Reading

logger = logging.getLogger(__name__)

LOG_HEADER: Sequence[str] = ("timestamp", "distance_cm")


class ReadingLogger:
    """
    Writes one ``timestamp,distance`` line per reading.

    The store is opened, written and closed on every append, so a crash can
    at worst leave the final line truncated. Failures to open the store are
    logged and the reading is dropped; they never propagate to the caller.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def ensure_store(self) -> bool:
        """
        Create the store with its header line if it does not exist yet.

        An existing store is left untouched. Returns ``False`` when the store
        could not be created.
        """
        if self.path.exists():
            return True
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", newline="", encoding="utf-8") as fh:
                csv.writer(fh, lineterminator="\n").writerow(LOG_HEADER)
        except OSError as exc:
            logger.warning("Could not create log file %s (%s)", self.path, exc)
            return False
        return True

    def append(self, reading: Reading) -> bool:
        """Append ``reading``; returns ``False`` if it could not be persisted."""
        try:
            fh = self.path.open("a", newline="", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s for writing (%s)", self.path, exc)
            return False
        with fh:
            csv.writer(fh, lineterminator="\n").writerow(reading.to_row())
        return True

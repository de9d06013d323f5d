"""Utilities for reading the log store back."""

from __future__ import annotations

import csv
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import numpy as np

from ..core.classifier import classify_distance
from ..core.models import Reading, Status
from .reading_log import LOG_HEADER

logger = logging.getLogger(__name__)


@dataclass
class LogSummary:
    count: int
    min_cm: float | None = None
    max_cm: float | None = None
    mean_cm: float | None = None
    status_counts: Dict[Status, int] = field(default_factory=dict)


def load_readings(path: Path) -> List[Reading]:
    """
    Load every record of a log store as :class:`Reading` objects.

    The header line is skipped. Malformed lines are logged and skipped so a
    truncated final line does not spoil the rest of the file.
    """
    readings: List[Reading] = []
    with Path(path).open("r", newline="", encoding="utf-8") as fh:
        for lineno, row in enumerate(csv.reader(fh), start=1):
            if not row:
                continue
            if lineno == 1 and tuple(row) == tuple(LOG_HEADER):
                continue
            if len(row) != 2:
                logger.warning("Skipping malformed line %d in %s: %r", lineno, path, row)
                continue
            try:
                distance = float(row[1])
            except ValueError:
                logger.warning("Bad distance on line %d in %s: %r", lineno, path, row[1])
                continue
            readings.append(Reading(timestamp=row[0], distance_cm=distance))
    return readings


def load_distances(path: Path) -> np.ndarray:
    """Return the ``distance_cm`` column as a 1-D float array."""
    distances = [reading.distance_cm for reading in load_readings(path)]
    return np.asarray(distances, dtype=float)


def summarize_log(path: Path) -> LogSummary:
    """Count readings in a store and describe their distance spread."""
    distances = load_distances(path)
    if distances.size == 0:
        return LogSummary(count=0)

    counts = Counter(classify_distance(float(d)) for d in distances)
    return LogSummary(
        count=int(distances.size),
        min_cm=float(np.min(distances)),
        max_cm=float(np.max(distances)),
        mean_cm=float(np.mean(distances)),
        status_counts={status: counts.get(status, 0) for status in Status},
    )

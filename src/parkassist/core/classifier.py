"""Distance-to-status classification."""

from __future__ import annotations

from .models import Status

# Upper bounds (exclusive) for each band, in centimetres.
STOP_BELOW_CM = 50.0
CAUTION_BELOW_CM = 100.0


def classify_distance(distance_cm: float) -> Status:
    """
    Classify a distance in centimetres.

    Rules are checked in order and the first match wins: negative values are
    ``INVALID``, below 50 cm is ``STOP``, below 100 cm is ``CAUTION`` and
    anything further away is ``SAFE``. ``0.0`` and ``-0.0`` are ``STOP``.
    """
    if distance_cm < 0:
        return Status.INVALID
    if distance_cm < STOP_BELOW_CM:
        return Status.STOP
    if distance_cm < CAUTION_BELOW_CM:
        return Status.CAUTION
    return Status.SAFE

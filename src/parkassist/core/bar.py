"""Text gauge for a distance reading."""

from __future__ import annotations

import math

BAR_WIDTH = 40
# Distance at which the gauge is completely filled.
FULL_SCALE_CM = 200.0

FILL_CHAR = "#"
EMPTY_CHAR = " "


def filled_cells(distance_cm: float) -> int:
    """Return how many of the ``BAR_WIDTH`` cells are filled for a distance."""
    clamped = max(0.0, min(FULL_SCALE_CM, float(distance_cm)))
    return int(math.floor((clamped / FULL_SCALE_CM) * BAR_WIDTH))


def render_distance_bar(distance_cm: float) -> str:
    """Return ``[###   ...]``, always ``BAR_WIDTH + 2`` characters long."""
    filled = filled_cells(distance_cm)
    return "[" + FILL_CHAR * filled + EMPTY_CHAR * (BAR_WIDTH - filled) + "]"

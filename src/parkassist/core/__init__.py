"""Core reading pipeline: classification, gauge rendering and the session loop."""

from .bar import render_distance_bar
from .classifier import classify_distance
from .clock import Clock, SystemClock
from .console import InputTokens
from .models import Reading, SessionMode, Status

__all__ = [
    "Clock",
    "InputTokens",
    "Reading",
    "SessionMode",
    "Status",
    "SystemClock",
    "classify_distance",
    "render_distance_bar",
]

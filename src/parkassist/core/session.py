"""Session loop tying input sources to classification, display and logging."""

from __future__ import annotations

import math
import sys
from typing import Iterable, Optional, TextIO

from ..dataio.reading_log import ReadingLogger
from .bar import render_distance_bar
from .classifier import classify_distance
from .clock import Clock, SystemClock, format_timestamp
from .console import InputTokens
from .models import Reading

DISTANCE_PROMPT = "Enter distance (cm): "


def parse_distance(token: str) -> Optional[float]:
    """Return the token as a finite float, or ``None`` if it is not one."""
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class ParkingSession:
    """
    One run of the simulator in either manual or automatic mode.

    Every reading goes through the same steps: stamp it with the clock,
    classify it, print the status line and the gauge, then append it to
    the reading log.
    """

    def __init__(
        self,
        reading_log: ReadingLogger,
        clock: Clock | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.reading_log = reading_log
        self.clock = clock or SystemClock()
        self.out = out or sys.stdout
        self.readings_processed = 0

    def _print(self, text: str = "") -> None:
        print(text, file=self.out, flush=True)

    def process(self, distance_cm: float) -> Reading:
        reading = Reading(
            timestamp=format_timestamp(self.clock.now()),
            distance_cm=float(distance_cm),
        )
        status = classify_distance(reading.distance_cm)
        self._print(f"[{reading.timestamp}] Distance: {reading.distance_cm:.2f} cm -> {status.value}")
        self._print(render_distance_bar(reading.distance_cm))
        self.reading_log.append(reading)
        self.readings_processed += 1
        return reading

    # ------------------------------------------------------------------ manual
    def run_manual(self, tokens: InputTokens) -> int:
        """
        Read distances from ``tokens`` until a negative value or end of input.

        Several values on one line are taken in order. A token that is not a
        number discards the rest of its line. Returns the number of readings
        processed.
        """
        processed = 0
        while True:
            print(DISTANCE_PROMPT, end="", file=self.out, flush=True)
            token = tokens.next_token()
            if token is None:
                self._print()
                return processed

            distance = parse_distance(token)
            if distance is None:
                self._print("Please enter a number.")
                tokens.discard_line()
                continue
            if distance < 0:
                self._print("Exiting manual mode.")
                return processed
            self.process(distance)
            processed += 1

    # --------------------------------------------------------------- automatic
    def run_automatic(
        self,
        source: Iterable[float],
        interval_s: float,
        max_readings: Optional[int] = None,
    ) -> int:
        """
        Process readings from ``source`` with a pause after each one.

        Runs until the source is exhausted, ``max_readings`` is reached, or
        the caller is interrupted (``KeyboardInterrupt`` propagates).
        """
        processed = 0
        if max_readings is not None and max_readings <= 0:
            return processed
        for distance in source:
            self.process(distance)
            processed += 1
            if max_readings is not None and processed >= max_readings:
                break
            self.clock.sleep(interval_s)
        return processed

"""
Synthetic distance readings for automatic mode.

Each reading is a base distance drawn uniformly from a wide range. With a
fixed probability the base value is replaced by a short distance, which
looks like an obstacle suddenly approaching the bumper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ..config import ParkAssistConfig


@dataclass(frozen=True)
class SimulationSettings:
    base_min_cm: int = 10
    base_max_cm: int = 250
    obstacle_probability: float = 0.3
    obstacle_min_cm: int = 0
    obstacle_max_cm: int = 79

    @classmethod
    def from_config(cls, config: ParkAssistConfig) -> "SimulationSettings":
        return cls(
            base_min_cm=config.base_min_cm,
            base_max_cm=config.base_max_cm,
            obstacle_probability=config.obstacle_probability,
            obstacle_min_cm=config.obstacle_min_cm,
            obstacle_max_cm=config.obstacle_max_cm,
        )


class DistanceSimulator:
    """Owns its random generator; two simulators with the same seed agree."""

    def __init__(
        self,
        rng: np.random.Generator,
        settings: SimulationSettings | None = None,
    ) -> None:
        self._rng = rng
        self.settings = settings or SimulationSettings()

    @classmethod
    def from_seed(
        cls,
        seed: int,
        settings: SimulationSettings | None = None,
    ) -> "DistanceSimulator":
        return cls(np.random.default_rng(seed), settings)

    def next_distance(self) -> float:
        s = self.settings
        # Both ranges are closed, hence endpoint=True.
        distance = self._rng.integers(s.base_min_cm, s.base_max_cm, endpoint=True)
        if self._rng.random() < s.obstacle_probability:
            distance = self._rng.integers(s.obstacle_min_cm, s.obstacle_max_cm, endpoint=True)
        return float(distance)

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.next_distance()

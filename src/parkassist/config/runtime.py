"""Runtime configuration for the simulator and the reading log."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml


DEFAULT_LOG_FILE = "parking_log.csv"

# Environment override for the log store location.
LOG_FILE_ENV = "PARKASSIST_LOG_FILE"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParkAssistConfig:
    """
    Tuning knobs for the log store and the automatic-mode simulator.

    The defaults reproduce the classic simulator: a base reading between
    10 and 250 cm every 800 ms, with a 30 % chance of an obstacle reading
    between 0 and 79 cm instead.
    """

    log_file: str = DEFAULT_LOG_FILE
    interval_ms: int = 800

    base_min_cm: int = 10
    base_max_cm: int = 250
    obstacle_probability: float = 0.3
    obstacle_min_cm: int = 0
    obstacle_max_cm: int = 79

    @property
    def log_path(self) -> Path:
        return Path(self.log_file).expanduser()

    @property
    def interval_s(self) -> float:
        return self.interval_ms / 1000.0

    def sanitized(self) -> ParkAssistConfig:
        """Return a copy with derived limits applied."""
        base_min = max(0, int(self.base_min_cm))
        base_max = max(base_min, int(self.base_max_cm))
        obstacle_min = max(0, int(self.obstacle_min_cm))
        obstacle_max = max(obstacle_min, int(self.obstacle_max_cm))
        return ParkAssistConfig(
            log_file=str(self.log_file or DEFAULT_LOG_FILE),
            interval_ms=max(0, int(self.interval_ms)),
            base_min_cm=base_min,
            base_max_cm=base_max,
            obstacle_probability=max(0.0, min(1.0, float(self.obstacle_probability))),
            obstacle_min_cm=obstacle_min,
            obstacle_max_cm=obstacle_max,
        )

    def with_env_overrides(self) -> ParkAssistConfig:
        """Apply ``PARKASSIST_LOG_FILE`` when it is set."""
        env_log_file = os.environ.get(LOG_FILE_ENV)
        if env_log_file:
            return replace(self, log_file=env_log_file)
        return self


# Keys accepted inside the ``simulation:`` block; they may also sit at top level.
SIMULATION_KEYS = frozenset(
    {
        "base_min_cm",
        "base_max_cm",
        "obstacle_probability",
        "obstacle_min_cm",
        "obstacle_max_cm",
    }
)


def _config_keys() -> set[str]:
    return {f.name for f in fields(ParkAssistConfig)}


def _collect_settings(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Gather config values from the top level and the ``simulation:`` block.

    Values in the block win over top-level duplicates. Keys that do not map
    to a setting are reported once and dropped.
    """
    known = _config_keys()
    settings: Dict[str, Any] = {}
    ignored: list[str] = []

    for key, value in data.items():
        if key == "simulation":
            continue
        if key in known:
            settings[key] = value
        else:
            ignored.append(str(key))

    block = data.get("simulation")
    if isinstance(block, Mapping):
        for key, value in block.items():
            if key in SIMULATION_KEYS:
                settings[key] = value
            else:
                ignored.append(f"simulation.{key}")
    elif block is not None:
        ignored.append("simulation")

    if ignored:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(ignored)))
    return settings


def config_from_mapping(data: Mapping[str, Any] | None) -> ParkAssistConfig:
    """Build a sanitized :class:`ParkAssistConfig` from a parsed YAML mapping."""
    if not data:
        return ParkAssistConfig()
    return ParkAssistConfig(**_collect_settings(data)).sanitized()


def load_config(path: str | Path | None) -> ParkAssistConfig:
    """
    Load configuration from the YAML file at ``path``.

    No path, or a path that does not exist, gives the defaults. An empty file
    is treated like a missing one. ``PARKASSIST_LOG_FILE`` is applied last so
    it wins over both.
    """
    cfg_path = Path(path).expanduser() if path is not None else None
    if cfg_path is None or not cfg_path.exists():
        return ParkAssistConfig().with_env_overrides()

    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        raise ValueError(f"{cfg_path}: top level must be a mapping, not {type(raw).__name__}")
    logger.info("Loaded configuration from %s", cfg_path)
    return config_from_mapping(raw).with_env_overrides()


__all__ = ["DEFAULT_LOG_FILE", "LOG_FILE_ENV", "ParkAssistConfig", "config_from_mapping", "load_config"]

"""Configuration objects and helpers for ParkAssist.

A small YAML file may tune where readings are logged and how the automatic
simulator behaves. Everything has a default, so the file is optional.
"""

from .runtime import (
    DEFAULT_LOG_FILE,
    ParkAssistConfig,
    config_from_mapping,
    load_config,
)

__all__ = ["DEFAULT_LOG_FILE", "ParkAssistConfig", "config_from_mapping", "load_config"]

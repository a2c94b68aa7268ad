# MIT License (see LICENSE)
"""
JSON serialization for simulation configuration.

Only configuration is persisted; simulation state always starts empty.
Files list just the values that differ from the defaults.

JSON Schema Overview:
---------------------
{
  "gravitational_constant": float,   # Default: 6.6743e-11
  "time_scale": float,               # Default: 2.0e11
  "distance_scale": float,           # Default: 1.0e9
  "min_distance": float,             # Pairwise floor, default: 1.0
  "max_force_distance": float,       # Pairwise cutoff, default: 100.0
  "speed_factor": float,             # Drag px -> velocity, default: 2.0e-14
  "central_mass": float,             # Default: 1.11e7
  "central_radius": float,           # Default: 5.0
  "body_mass": float,                # Default: 200000.0
  "body_radius": float,              # Default: 1.0
  "max_bodies": int,                 # Default: 10
  "trail_length": int,               # Default: 10
  "trail_interval_ms": float,        # Default: 35
  "effect_duration_ms": float,       # Default: 105
  "draw_interval_ms": float,         # Default: 70
  "screen_margin": float,            # Default: 20
  "view_size": float                 # Default: 50
}

The GRAVITY_SANDBOX_CONFIG environment variable may name such a file;
resolve_config() picks it up.
"""
from __future__ import annotations
import json
import logging
import os
from dataclasses import asdict
from typing import Any

from ..config import SimulationConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRAVITY_SANDBOX_CONFIG"

_INT_FIELDS = ("max_bodies", "trail_length")


def load_config_raw(path: str) -> dict[str, Any]:
    """Load the raw JSON object from a config file without validation."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a dictionary.

    Missing keys keep their defaults.

    Raises:
        ValueError: On unknown keys, or values SimulationConfig rejects.
    """
    known = set(SimulationConfig.field_names())
    unknown = sorted(set(d) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in d.items():
        kwargs[key] = int(value) if key in _INT_FIELDS else float(value)
    return SimulationConfig(**kwargs)


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """Serialize the fields of `config` that differ from the defaults."""
    defaults = asdict(SimulationConfig())
    return {k: v for k, v in asdict(config).items() if v != defaults[k]}


def load_config(path: str) -> SimulationConfig:
    """
    Load and validate a SimulationConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: On unknown keys or invalid values.
    """
    config = config_from_json(load_config_raw(path))
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: SimulationConfig, path: str, indent: int = 2) -> None:
    """Write the non-default fields of `config` to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)


def resolve_config(path: str | None = None) -> SimulationConfig:
    """
    Config from `path`, else from $GRAVITY_SANDBOX_CONFIG, else defaults.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return SimulationConfig()
    return load_config(path)

# MIT License (see LICENSE)
"""
Input/Output utilities for the gravity sandbox.

This subpackage provides JSON load/save for SimulationConfig. Simulation
state itself is never persisted.

Typical usage:
    from gravity_sandbox.io import load_config, save_config, resolve_config

    config = resolve_config()          # $GRAVITY_SANDBOX_CONFIG or defaults
    save_config(config, "tuned.json")
"""
from .json_io import (
    CONFIG_ENV_VAR,
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
    resolve_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    # Loading
    "load_config",
    "load_config_raw",
    "resolve_config",
    # Saving
    "save_config",
    # Serialization
    "config_from_json",
    "config_to_json",
]

# MIT License (see LICENSE)
"""
JSON loading and saving of simulation settings.

Only SimulationConfig is serialized; particle state is not persisted.

JSON Schema Overview:
---------------------
{
  "k_electrostatic": float,          # Default: 0.1, > 0
  "k_gravity": float,                # Default: 0.1, > 0
  "k_drag": float,                   # Default: 0.1, >= 0
  "enable_electrostatics": bool,     # Default: true
  "enable_gravity": bool,            # Default: true
  "enable_drag": bool,               # Default: true
  "overlap_eps": float,              # Default: 1e-4, > 0
  "time_scale": float                # Default: 1.0, >= 0
}

All keys are optional. Unknown keys are rejected so that a typo in a
settings file does not silently fall back to a default.
"""
from __future__ import annotations
import dataclasses
import json
from typing import Any

from ..config import SimulationConfig
from ..errors import ConfigError

_FIELDS = tuple(f.name for f in dataclasses.fields(SimulationConfig))


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a parsed JSON object.

    Args:
        d: Mapping of config field names to values.

    Raises:
        ConfigError: If ``d`` is not an object, has unknown keys, or holds
            out-of-range values.
    """
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a JSON object, got {type(d).__name__}")
    unknown = sorted(set(d) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return SimulationConfig(**d)


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """
    Serialize a SimulationConfig to a dict (round-trip compatible).

    Only fields that differ from the defaults are included to keep the
    output concise.
    """
    default = SimulationConfig()
    return {
        name: getattr(config, name)
        for name in _FIELDS
        if getattr(config, name) != getattr(default, name)
    }


def load_config(path: str) -> SimulationConfig:
    """
    Read a SimulationConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        ConfigError: If the file is not valid JSON or the values are invalid.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON: {e}") from e
    return config_from_json(data)


def save_config(config: SimulationConfig, path: str, indent: int = 2) -> None:
    """Write a SimulationConfig to a JSON file on disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)

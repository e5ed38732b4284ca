# MIT License (see LICENSE)
"""
Input/Output utilities for simulation settings.

Typical usage:
    from particle_box.io import load_config, save_config

    config = load_config("settings.json")
    system = ParticleSystem(config=config)
"""
from .json_io import (
    load_config,
    save_config,
    config_from_json,
    config_to_json,
)

__all__ = [
    "load_config",
    "save_config",
    "config_from_json",
    "config_to_json",
]

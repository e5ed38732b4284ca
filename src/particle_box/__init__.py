# MIT License (see LICENSE)
"""
particle_box - Physics core of an interactive 2D charged-particle box.

Point particles carrying charge and mass move inside the unit box under
pairwise electrostatic forces, uniform gravity and quadratic drag, and
bounce elastically off the walls.

Main entry points:
    - ParticleSystem: The particle collection and its step(dt).
    - Particle: A charged point mass with a stable id.
    - SimulationConfig: Force constants and switches.

Submodules:
    - core: Force model, integrator, wall reflection, invariants.
    - io: JSON loading/saving of SimulationConfig.
    - profiler: Optional timing of step phases.

Example:
    from particle_box import ParticleSystem, SimulationConfig

    system = ParticleSystem(config=SimulationConfig(k_electrostatic=1.0))
    system.create((0.4, 0.5), charge=1.0, mass=0.5)
    system.create((0.6, 0.5), charge=-1.0, mass=0.5)
    system.step(1 / 60)
"""
from .system import ParticleSystem
from .types import Particle
from .config import SimulationConfig
from .errors import (
    ParticleBoxError,
    InvalidParticleError,
    InvalidTimeStepError,
    ConfigError,
)

__all__ = [
    # Core simulation
    "ParticleSystem",
    "Particle",
    "SimulationConfig",
    # Errors
    "ParticleBoxError",
    "InvalidParticleError",
    "InvalidTimeStepError",
    "ConfigError",
]

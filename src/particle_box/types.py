# MIT License (see LICENSE)
"""
Core type definitions for the particle box simulation.

Defines Particle, the only simulation entity: a charged point mass living
in the unit box. Its motion follows plain Newtonian mechanics:
  dx/dt = v
  dv/dt = F/m
with F the net electrostatic, gravitational and drag force (see core/).
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import BOX_MIN, BOX_MAX
from .errors import InvalidParticleError
from .util import f64, zeros2, is_finite_vec, in_closed_range


def validate_particle_args(position, charge: float, mass: float) -> np.ndarray:
    """
    Check construction arguments and return the position as a float64 array.

    Raises:
        InvalidParticleError: If position is not a finite 2-vector inside
            [0, 1]², charge is outside [-1, 1], or mass is outside (0, 1].
    """
    try:
        pos = f64(position)
    except (TypeError, ValueError) as e:
        raise InvalidParticleError(f"position is not numeric: {position!r}") from e
    if pos.shape != (2,):
        raise InvalidParticleError(f"position must be a 2-vector, got shape {pos.shape}")
    if not is_finite_vec(pos) or np.any(pos < BOX_MIN) or np.any(pos > BOX_MAX):
        raise InvalidParticleError(
            f"position {pos.tolist()} outside the box [{BOX_MIN}, {BOX_MAX}]²"
        )
    try:
        q, m = float(charge), float(mass)
    except (TypeError, ValueError) as e:
        raise InvalidParticleError(f"charge and mass must be numbers: {charge!r}, {mass!r}") from e
    if not in_closed_range(q, -1.0, 1.0):
        raise InvalidParticleError(f"charge must be in [-1, 1], got {charge}")
    if not in_closed_range(m, 0.0, 1.0) or m == 0.0:
        raise InvalidParticleError(f"mass must be in (0, 1], got {mass}")
    return pos


def _vec2(value, name: str) -> np.ndarray:
    """Coerce a velocity-like value to a float64 2-vector (may be non-finite)."""
    try:
        v = f64(value)
    except (TypeError, ValueError) as e:
        raise InvalidParticleError(f"{name} is not numeric: {value!r}") from e
    if v.shape != (2,):
        raise InvalidParticleError(f"{name} must be a 2-vector, got shape {v.shape}")
    return v


@dataclass(eq=False)
class Particle:
    """
    A charged point mass.

    Attributes:
        id: Identifier assigned by ParticleSystem. Used to exclude
            self-interaction and to track a particle across frames.
            Cannot be reassigned once set.
        position: [x, y], inside the unit box after every step.
        charge: Charge in [-1, 1]; the sign picks attraction or repulsion.
        mass: Mass in (0, 1]; divides the net force.
        velocity: [vx, vy], starts at rest.
        acceleration: [ax, ay] from the most recent step, kept so that
            renderers can read it without recomputing forces.

    Note:
        Particles compare by identity, not by value; use ``id`` to match
        particles across snapshots.
    """
    id: int
    position: np.ndarray | tuple[float, float]
    charge: float
    mass: float
    velocity: np.ndarray = field(default_factory=zeros2)
    acceleration: np.ndarray = field(default_factory=zeros2)

    def __post_init__(self) -> None:
        self.position = validate_particle_args(self.position, self.charge, self.mass)
        self.charge = float(self.charge)
        self.mass = float(self.mass)
        self.velocity = _vec2(self.velocity, "velocity")
        self.acceleration = _vec2(self.acceleration, "acceleration")

    def __setattr__(self, name: str, value) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Particle.id is immutable")
        object.__setattr__(self, name, value)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m); mass is positive by construction."""
        return 1.0 / self.mass

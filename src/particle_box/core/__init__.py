# MIT License (see LICENSE)
"""
Core physics of the particle box.

This subpackage provides:
    - Force model: electrostatic, gravity, drag.
    - Integrator: constant-acceleration semi-analytic step.
    - Boundary handling: elastic reflection off the box walls.
    - Invariants: energy, momentum and speed read-outs.

Typical usage:
    from particle_box.core import net_force, apply_force

    f = net_force(p, particles, config)
    apply_force(p, f, dt, config)
"""
from .forces import (
    electrostatic_force,
    net_electrostatic_force,
    gravitational_force,
    drag_force,
    net_force,
)
from .integrators import semi_analytic_step
from .boundary import reflect_from_walls, apply_force
from .invariants import kinetic_energy, kinetic_energies, linear_momentum, speeds

__all__ = [
    # Forces
    "electrostatic_force",
    "net_electrostatic_force",
    "gravitational_force",
    "drag_force",
    "net_force",
    # Integration
    "semi_analytic_step",
    "reflect_from_walls",
    "apply_force",
    # Invariants
    "kinetic_energy",
    "kinetic_energies",
    "linear_momentum",
    "speeds",
]

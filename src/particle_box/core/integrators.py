# MIT License (see LICENSE)
"""
Integrator for particle motion.

The update assumes the acceleration is constant over the time step:

    a  = (F + F_drag) / m
    Δv = a * dt
    Δx = dt * v + dt * Δv / 2        (area under the linear v(t) ramp)
    v += Δv
    x += Δx

Δx is taken from the velocity *before* the update plus half of Δv, which
equals v*dt + a*dt²/2. This is neither explicit Euler nor leapfrog, and the
order of the statements matters for the energy behaviour of the simulation.
"""
from __future__ import annotations

import numpy as np

from ..constants import K_DRAG
from ..types import Particle
from .forces import drag_force


def semi_analytic_step(
    p: Particle,
    force: np.ndarray,
    dt: float,
    k_d: float = K_DRAG,
    drag: bool = True,
) -> None:
    """
    Advance one particle by ``dt`` under a precomputed net force.

    Args:
        p: Particle to integrate (modified in-place).
        force: Net electrostatic + gravitational force for this step.
        dt: Time step.
        k_d: Drag coefficient.
        drag: Whether to add quadratic drag to ``force``.

    Note:
        Updates p.acceleration, p.velocity and p.position. The box is not
        enforced here; see core.boundary.
    """
    total = force + drag_force(p, k_d) if drag else force
    p.acceleration = total * p.inv_mass

    d_velocity = p.acceleration * dt
    d_position = dt * p.velocity + dt * d_velocity / 2.0

    p.velocity = p.velocity + d_velocity
    p.position = p.position + d_position

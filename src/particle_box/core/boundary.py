# MIT License (see LICENSE)
"""
Wall collisions with the simulation box.

Particles bounce off the box walls elastically: when a coordinate leaves
[lower, upper] it is clamped back onto the wall and the matching velocity
component changes sign. Each axis is handled on its own, so a particle that
hits a corner has both components flipped in the same step.
"""
from __future__ import annotations

import numpy as np

from ..config import SimulationConfig
from ..constants import BOX_MIN, BOX_MAX
from ..types import Particle
from .integrators import semi_analytic_step


def reflect_from_walls(
    p: Particle,
    lower: float = BOX_MIN,
    upper: float = BOX_MAX,
) -> tuple[bool, bool]:
    """
    Clamp ``p`` into the box and reflect its velocity on every axis hit.

    Returns:
        (hit_x, hit_y): Whether a wall was hit on each axis.
    """
    hits = [False, False]
    for axis in (0, 1):
        if p.position[axis] < lower:
            p.position[axis] = lower
            p.velocity[axis] = -p.velocity[axis]
            hits[axis] = True
        if p.position[axis] > upper:
            p.position[axis] = upper
            p.velocity[axis] = -p.velocity[axis]
            hits[axis] = True
    return hits[0], hits[1]


def apply_force(
    p: Particle,
    force: np.ndarray,
    dt: float,
    config: SimulationConfig,
) -> tuple[bool, bool]:
    """
    Integrate ``p`` under ``force`` for ``dt`` and keep it inside the box.

    This is the whole per-particle update of a tick: integration, then
    wall reflection within the same step.
    """
    semi_analytic_step(p, force, dt, k_d=config.k_drag, drag=config.enable_drag)
    return reflect_from_walls(p)

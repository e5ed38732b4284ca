# MIT License (see LICENSE)
"""
Read-side summaries of particle state.

Used for debugging stability and by renderers that show speed and energy
distributions. With gravity and drag disabled, total momentum is conserved
between wall hits (pairwise forces are equal and opposite); wall hits and
the overlap cut-off both break conservation on purpose.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import Particle


def speeds(particles: Iterable[Particle]) -> np.ndarray:
    """Per-particle speed |v|, in collection order."""
    return np.array([np.hypot(p.velocity[0], p.velocity[1]) for p in particles], dtype=np.float64)


def kinetic_energies(particles: Iterable[Particle]) -> np.ndarray:
    """Per-particle kinetic energy 0.5 * m * |v|², in collection order."""
    return np.array(
        [0.5 * p.mass * float(np.dot(p.velocity, p.velocity)) for p in particles],
        dtype=np.float64,
    )


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy of the system.

    T = Σ 0.5 * m * v²
    """
    return float(np.sum(kinetic_energies(particles)))


def linear_momentum(particles: Iterable[Particle]) -> np.ndarray:
    """
    Total linear momentum of the system.

    P = Σ m * v
    """
    p_total = np.zeros(2, dtype=np.float64)
    for p in particles:
        p_total += p.mass * p.velocity
    return p_total

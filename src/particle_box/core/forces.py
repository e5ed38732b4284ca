# MIT License (see LICENSE)
"""
Force model for the particle box.

Functions here compute force vectors and return them; nothing is mutated.
The system step relies on that: all forces of a tick are computed from one
snapshot of particle state before any particle moves.

Forces:
- Electrostatic: F = K_e * q1 * q2 * r / |r|², with r pointing from the
  other particle to this one. Same-sign charges repel.
- Gravity: F = (0, -K_g * m).
- Drag: F = -K_d * |v|² * v̂ (quadratic, opposes motion).

Degenerate inputs (overlapping particles, non-finite distances or speeds)
contribute a zero vector instead of raising. This is an ad hoc cut-off,
not a softened potential.

Complexity of net_electrostatic_force over a whole system is O(N²).
"""
from __future__ import annotations
from typing import Iterable
import math

import numpy as np

from ..config import SimulationConfig
from ..constants import K_ELECTROSTATIC, K_GRAVITY, K_DRAG, OVERLAP_EPS
from ..types import Particle
from ..util import norm2, unit, zeros2


def electrostatic_force(
    p: Particle,
    other: Particle,
    k_e: float = K_ELECTROSTATIC,
    eps: float = OVERLAP_EPS,
) -> np.ndarray:
    """
    Force exerted on ``p`` by ``other``.

    Args:
        p: Particle the force acts on.
        other: Source particle.
        k_e: Electrostatic constant.
        eps: Squared distances below this count as overlap.

    Returns:
        Force vector [Fx, Fy]. Zero if |r|² is not finite or below eps,
        which covers exact overlap (division by zero) and near overlap
        (huge forces that throw particles across the box).
    """
    r = p.position - other.position
    r_len_sq = norm2(r)
    if not math.isfinite(r_len_sq) or r_len_sq < eps:
        return zeros2()
    return (k_e * (p.charge * other.charge) / r_len_sq) * r


def net_electrostatic_force(
    p: Particle,
    peers: Iterable[Particle],
    k_e: float = K_ELECTROSTATIC,
    eps: float = OVERLAP_EPS,
) -> np.ndarray:
    """
    Sum of electrostatic forces on ``p`` from every peer.

    Peers sharing ``p.id`` are skipped, so ``peers`` may be the whole
    collection including ``p`` itself. Exclusion is by id: a different
    particle sitting exactly on top of ``p`` is still a peer (it just
    contributes zero through the overlap guard).

    Contributions are added in the order ``peers`` yields them.
    """
    total = zeros2()
    for other in peers:
        if other.id == p.id:
            continue
        total += electrostatic_force(p, other, k_e, eps)
    return total


def gravitational_force(p: Particle, k_g: float = K_GRAVITY) -> np.ndarray:
    """Uniform downward force proportional to mass: (0, -k_g * m)."""
    return np.array([0.0, -k_g * p.mass], dtype=np.float64)


def drag_force(p: Particle, k_d: float = K_DRAG) -> np.ndarray:
    """
    Quadratic drag opposing the current velocity.

    Returns zero when the particle is at rest or |v|² is not finite.

    Note:
        Because the magnitude falls off as |v|², a particle slowed only by
        drag keeps a small residual speed for a long time instead of
        stopping. That is how this model behaves, not a bug in this
        function; lower k_d or disable drag if it matters.
    """
    v_len_sq = norm2(p.velocity)
    if v_len_sq == 0.0 or not math.isfinite(v_len_sq):
        return zeros2()
    return (-k_d * v_len_sq) * unit(p.velocity)


def net_force(
    p: Particle,
    peers: Iterable[Particle],
    config: SimulationConfig,
) -> np.ndarray:
    """
    Net electrostatic plus gravitational force on ``p``.

    Drag is not included: it depends on the particle's own velocity and is
    added by the integrator.
    """
    f = zeros2()
    if config.enable_electrostatics:
        f += net_electrostatic_force(p, peers, config.k_electrostatic, config.overlap_eps)
    if config.enable_gravity:
        f += gravitational_force(p, config.k_gravity)
    return f

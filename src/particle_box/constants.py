# MIT License (see LICENSE)
"""
Default constants for the particle box simulation.

All quantities are dimensionless: the simulation lives in the unit box
[0, 1]² and the force constants are tuning knobs rather than physical
values. Every constant here is only a default; the live values come from
SimulationConfig.
"""
from __future__ import annotations

# Electrostatic constant K_e in F = K_e * q1 * q2 * r / |r|².
# Values that give a watchable simulation lie roughly in 0.1 - 1.5.
K_ELECTROSTATIC: float = 0.1

# Gravity constant K_g in F = (0, -K_g * m).
K_GRAVITY: float = 0.1

# Quadratic drag constant K_d in F = -K_d * |v|² * v̂.
K_DRAG: float = 0.1

# Squared distances below this are treated as overlap and produce no
# electrostatic force. This is a cut-off, not a softened potential: pairs
# closer than sqrt(OVERLAP_EPS) = 0.01 simply stop interacting.
OVERLAP_EPS: float = 1e-4

# Bounding box of the simulation, per axis.
BOX_MIN: float = 0.0
BOX_MAX: float = 1.0

# Smallest mass handed out by ParticleSystem.spawn_random; mass itself only
# has to be strictly positive.
MIN_SPAWN_MASS: float = 0.05

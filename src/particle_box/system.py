# MIT License (see LICENSE)
"""
The particle system and its simulation step.

ParticleSystem owns the particle collection and is the only interface the
UI needs:
- create() / spawn_random() add particles with fresh ids.
- step(dt) advances every particle once per frame.
- particles, get(), snapshot() give read access between steps.

A step is two-phase:
    1. Compute the net force on every particle from the positions as they
       stood at the start of the step, and store all of them.
    2. Integrate every particle under its stored force and reflect it off
       the box walls.
No particle moves before every force has been computed, so the result does
not depend on the order of the collection. Peers are also summed in id
order, which makes that hold bit for bit.

Readers must not look at particles while step() runs. There is no locking;
the system is single-threaded.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator
import logging
import math

import numpy as np

from .config import SimulationConfig
from .constants import MIN_SPAWN_MASS
from .core.boundary import apply_force
from .core.forces import net_force
from .errors import InvalidParticleError, InvalidTimeStepError
from .profiler import Profiler
from .types import Particle

logger = logging.getLogger(__name__)


@dataclass
class ParticleSystem:
    """
    Collection of particles in the unit box plus the settings that drive it.

    Attributes:
        config: Force constants and switches. Swap it with configure()
            between steps to follow UI sliders.
        profiler: Optional Profiler; step() then times the "forces" and
            "integrate" phases.
        particles: The live collection. Particles keep their id for their
            whole life regardless of where they sit in this list.
        time: Simulated time elapsed (sum of scaled dt).
        step_count: Number of steps that advanced time (dt * time_scale > 0).
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    time: float = 0.0
    step_count: int = 0

    def __post_init__(self) -> None:
        ids = [p.id for p in self.particles]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise InvalidParticleError(f"Particle ids must be unique, duplicated: {dupes}")
        self._next_id = max((p.id for p in self.particles), default=-1) + 1
        logger.info(
            "ParticleSystem created with %d particles (k_e=%g, k_g=%g, k_d=%g)",
            len(self.particles),
            self.config.k_electrostatic,
            self.config.k_gravity,
            self.config.k_drag,
        )

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # ------------------------------------------------------------------
    # Collection management
    # ------------------------------------------------------------------

    def create(
        self,
        position: tuple[float, float] | np.ndarray,
        charge: float,
        mass: float,
        index: int | None = None,
    ) -> Particle:
        """
        Create a particle at rest and add it to the system.

        Args:
            position: [x, y] inside [0, 1]².
            charge: Charge in [-1, 1].
            mass: Mass in (0, 1].
            index: Where to insert it in the collection; appended if None.
                The position in the list has no effect on the physics.

        Returns:
            The new particle, carrying the next id.

        Raises:
            InvalidParticleError: If any argument is out of range. Nothing
                is inserted and no id is used up.
        """
        try:
            p = Particle(self._next_id, position, charge, mass)
        except InvalidParticleError as e:
            logger.debug("Rejected particle: %s", e)
            raise
        self._next_id += 1
        if index is None:
            self.particles.append(p)
        else:
            self.particles.insert(index, p)
        logger.debug("Created particle %d at %s (q=%g, m=%g)", p.id, p.position.tolist(), p.charge, p.mass)
        return p

    def spawn_random(
        self,
        n: int,
        rng: np.random.Generator | None = None,
        charge_range: tuple[float, float] = (-1.0, 1.0),
        mass_range: tuple[float, float] = (MIN_SPAWN_MASS, 1.0),
    ) -> list[Particle]:
        """
        Add ``n`` particles with uniformly random position, charge and mass.

        Args:
            n: Number of particles to add.
            rng: Random source; a fresh default_rng() if None. Pass a seeded
                generator for reproducible scenes.
            charge_range: (low, high) for the charge, within [-1, 1].
            mass_range: (low, high) for the mass, low > 0 and high <= 1.

        Returns:
            The new particles in creation order.

        Raises:
            InvalidParticleError: If the ranges allow invalid particles.
                Particles created before the failing one stay in the system.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        rng = np.random.default_rng() if rng is None else rng
        created = []
        for _ in range(n):
            pos = rng.uniform(0.0, 1.0, size=2)
            charge = float(rng.uniform(*charge_range))
            mass = float(rng.uniform(*mass_range))
            created.append(self.create(pos, charge, mass))
        logger.info("Spawned %d random particles (total %d)", n, len(self.particles))
        return created

    def get(self, particle_id: int) -> Particle | None:
        """Find a live particle by id, or None if it is not in the system."""
        for p in self.particles:
            if p.id == particle_id:
                return p
        return None

    def remove(self, particle_id: int) -> Particle:
        """
        Remove a particle by id and return it.

        The system never removes particles on its own; eviction is up to
        the caller. Ids are not reused.

        Raises:
            KeyError: If no live particle has this id.
        """
        for i, p in enumerate(self.particles):
            if p.id == particle_id:
                del self.particles[i]
                logger.debug("Removed particle %d", particle_id)
                return p
        raise KeyError(particle_id)

    def clear(self) -> None:
        """Remove every particle. Ids keep counting up."""
        logger.debug("Clearing %d particles", len(self.particles))
        self.particles.clear()

    def configure(self, **changes) -> SimulationConfig:
        """
        Replace config fields, e.g. configure(k_gravity=2.0).

        Raises:
            ConfigError: If a value is out of range; the old config stays.
        """
        self.config = self.config.replace(**changes)
        logger.info("Config updated: %s", changes)
        return self.config

    def snapshot(self) -> dict[str, np.ndarray]:
        """
        Copy the current state out as arrays, in collection order.

        Returns:
            Dict with 'ids' (N,), 'positions' (N, 2), 'velocities' (N, 2),
            'accelerations' (N, 2), 'charges' (N,), 'masses' (N,).
        """
        ps = self.particles
        return {
            "ids": np.array([p.id for p in ps], dtype=np.int64),
            "positions": np.array([p.position for p in ps], dtype=np.float64).reshape(-1, 2),
            "velocities": np.array([p.velocity for p in ps], dtype=np.float64).reshape(-1, 2),
            "accelerations": np.array([p.acceleration for p in ps], dtype=np.float64).reshape(-1, 2),
            "charges": np.array([p.charge for p in ps], dtype=np.float64),
            "masses": np.array([p.mass for p in ps], dtype=np.float64),
        }

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _compute_forces(self) -> list[np.ndarray]:
        """Phase 1: net force on every particle, nothing mutated."""
        peers = sorted(self.particles, key=lambda p: p.id)
        return [net_force(p, peers, self.config) for p in self.particles]

    def _integrate(self, forces: list[np.ndarray], dt: float) -> None:
        """Phase 2: move every particle under its precomputed force."""
        for p, f in zip(self.particles, forces):
            apply_force(p, f, dt, self.config)

    def step(self, dt: float) -> None:
        """
        Advance the whole system by ``dt`` (times config.time_scale).

        Args:
            dt: Frame time, >= 0. Zero is a no-op.

        Raises:
            InvalidTimeStepError: If dt is negative or not finite.
        """
        try:
            dt = float(dt)
        except (TypeError, ValueError) as e:
            raise InvalidTimeStepError(f"dt must be a number, got {dt!r}") from e
        if not math.isfinite(dt) or dt < 0:
            raise InvalidTimeStepError(f"dt must be finite and >= 0, got {dt}")

        h = dt * self.config.time_scale
        if h == 0.0:
            return

        prof = self.profiler
        if prof:
            with prof.section("forces"):
                forces = self._compute_forces()
            with prof.section("integrate"):
                self._integrate(forces, h)
        else:
            forces = self._compute_forces()
            self._integrate(forces, h)

        self.time += h
        self.step_count += 1

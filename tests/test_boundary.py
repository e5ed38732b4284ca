# MIT License (see LICENSE)
import numpy as np
import pytest
from particle_box.config import SimulationConfig
from particle_box.system import ParticleSystem
from particle_box.types import Particle
from particle_box.core.boundary import reflect_from_walls, apply_force


def test_inside_box_untouched():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=1.0, velocity=(1.0, -1.0))

    hits = reflect_from_walls(p)

    assert hits == (False, False)
    np.testing.assert_array_equal(p.position, [0.5, 0.5])
    np.testing.assert_array_equal(p.velocity, [1.0, -1.0])


def test_left_wall_reflection():
    """
    Moving left at x=0.01 with v=(-5, 0) and dt=0.1 crosses x=0; the step
    must end on the wall with v_x flipped.
    """
    system = ParticleSystem(config=SimulationConfig(enable_gravity=False))
    p = system.create((0.01, 0.5), charge=0.0, mass=1.0)
    p.velocity = np.array([-5.0, 0.0])

    system.step(0.1)

    assert p.position[0] == 0.0
    assert p.velocity[0] > 0
    assert p.position[1] == 0.5


def test_corner_flips_both_axes():
    p = Particle(0, (0.99, 0.99), charge=0.0, mass=1.0, velocity=(1.0, 2.0))
    config = SimulationConfig(enable_drag=False)

    hits = apply_force(p, np.zeros(2), 0.1, config)

    assert hits == (True, True)
    np.testing.assert_array_equal(p.position, [1.0, 1.0])
    np.testing.assert_allclose(p.velocity, [-1.0, -2.0])


def test_floor_and_right_wall():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=1.0)
    p.position = np.array([1.2, -0.3])
    p.velocity = np.array([0.5, -0.7])

    hits = reflect_from_walls(p)

    assert hits == (True, True)
    np.testing.assert_array_equal(p.position, [1.0, 0.0])
    np.testing.assert_array_equal(p.velocity, [-0.5, 0.7])


def test_only_crossed_axis_flips():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=1.0)
    p.position = np.array([0.5, 1.05])
    p.velocity = np.array([0.3, 0.4])

    assert reflect_from_walls(p) == (False, True)
    np.testing.assert_array_equal(p.velocity, [0.3, -0.4])


def test_custom_limits():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=1.0, velocity=(1.0, 0.0))

    assert reflect_from_walls(p, lower=0.0, upper=0.4) == (True, True)
    np.testing.assert_array_equal(p.position, [0.4, 0.4])


def test_gravity_keeps_particle_in_box():
    """A particle resting on the floor under gravity never sinks below it."""
    system = ParticleSystem(config=SimulationConfig(k_gravity=8.0))
    p = system.create((0.5, 0.0), charge=0.0, mass=1.0)

    for _ in range(500):
        system.step(1 / 60)
        assert 0.0 <= p.position[1] <= 1.0


def test_particles_never_leave_box():
    """
    Strong constants, mixed charges and light particles: whatever happens
    to the velocities, positions stay in [0, 1]² after every step.
    """
    config = SimulationConfig(k_electrostatic=1.5, k_gravity=8.0, k_drag=0.1)
    system = ParticleSystem(config=config)
    system.spawn_random(25, rng=np.random.default_rng(2024))

    for i in range(300):
        system.step((0.0, 1 / 120, 1 / 60, 0.05)[i % 4])
        pos = system.snapshot()["positions"]
        assert not np.any(np.isnan(pos))
        assert np.all(pos >= 0.0) and np.all(pos <= 1.0)

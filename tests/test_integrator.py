# MIT License (see LICENSE)
import numpy as np
import pytest
from particle_box.types import Particle
from particle_box.core.integrators import semi_analytic_step


def test_free_motion():
    """No force, no drag: x(t) = x0 + v0 t."""
    p = Particle(0, (0.2, 0.5), charge=0.0, mass=1.0, velocity=(1.0, 0.0))

    semi_analytic_step(p, np.zeros(2), dt=0.1, drag=False)

    np.testing.assert_allclose(p.position, [0.3, 0.5])
    np.testing.assert_allclose(p.velocity, [1.0, 0.0])
    np.testing.assert_array_equal(p.acceleration, [0.0, 0.0])


def test_constant_force_from_rest():
    """
    Analytic (constant a):
      a  = F/m = (0, -1)/0.5 = (0, -2)
      v  = a dt         = (0, -0.2)
      Δy = 1/2 a dt²    = -0.01
    """
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=0.5)

    semi_analytic_step(p, np.array([0.0, -1.0]), dt=0.1, drag=False)

    np.testing.assert_allclose(p.acceleration, [0.0, -2.0])
    np.testing.assert_allclose(p.velocity, [0.0, -0.2])
    np.testing.assert_allclose(p.position, [0.5, 0.49])


def test_position_uses_pre_update_velocity_plus_half_delta():
    """
    v0 = 0.5, a = 1, dt = 0.2:
      Δv = 0.2
      Δx = dt*v0 + dt*Δv/2 = 0.1 + 0.02 = 0.12
    Explicit Euler would give 0.1 and semi-implicit Euler 0.14.
    """
    p = Particle(0, (0.3, 0.5), charge=0.0, mass=1.0, velocity=(0.5, 0.0))

    semi_analytic_step(p, np.array([1.0, 0.0]), dt=0.2, drag=False)

    assert p.position[0] == pytest.approx(0.42)
    assert p.velocity[0] == pytest.approx(0.7)


def test_drag_enters_acceleration():
    """
    v = (0.3, 0.4): |v|² = 0.25, drag = -0.1 * 0.25 * (0.6, 0.8) = (-0.015, -0.02)
    a = drag / 0.5 = (-0.03, -0.04)
    """
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=0.5, velocity=(0.3, 0.4))

    semi_analytic_step(p, np.zeros(2), dt=0.01, k_d=0.1, drag=True)

    np.testing.assert_allclose(p.acceleration, [-0.03, -0.04])


def test_drag_switch_off():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=0.5, velocity=(0.3, 0.4))

    semi_analytic_step(p, np.zeros(2), dt=0.01, k_d=0.1, drag=False)

    np.testing.assert_array_equal(p.acceleration, [0.0, 0.0])
    np.testing.assert_allclose(p.velocity, [0.3, 0.4])


def test_zero_dt_keeps_state_but_updates_acceleration():
    p = Particle(0, (0.5, 0.5), charge=0.0, mass=0.25)

    semi_analytic_step(p, np.array([1.0, 0.0]), dt=0.0, drag=False)

    np.testing.assert_array_equal(p.position, [0.5, 0.5])
    np.testing.assert_array_equal(p.velocity, [0.0, 0.0])
    np.testing.assert_allclose(p.acceleration, [4.0, 0.0])


def test_integrator_does_not_clamp():
    """Leaving the box is the boundary handler's job, not the integrator's."""
    p = Particle(0, (0.01, 0.5), charge=0.0, mass=1.0, velocity=(-5.0, 0.0))

    semi_analytic_step(p, np.zeros(2), dt=0.1, drag=False)

    assert p.position[0] == pytest.approx(-0.49)

# MIT License (see LICENSE)
"""
Simulation settings.

SimulationConfig gathers the tunable force constants and switches that the
UI exposes as sliders and checkboxes. It is immutable; a slider change
produces a new, validated config via replace().
"""
from __future__ import annotations
import dataclasses
import math
from dataclasses import dataclass

from .constants import K_ELECTROSTATIC, K_GRAVITY, K_DRAG, OVERLAP_EPS
from .errors import ConfigError


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunable parameters of the force model and the integrator.

    Attributes:
        k_electrostatic: K_e, scale of the pairwise force. Must be > 0.
        k_gravity: K_g, downward force per unit mass. Must be > 0.
        k_drag: K_d, quadratic drag coefficient. Must be >= 0.
        enable_electrostatics: Include pairwise electrostatic forces.
        enable_gravity: Include uniform gravity.
        enable_drag: Include quadratic drag. Note that with drag alone
            particles slow down but never quite come to rest: the drag
            magnitude shrinks with |v|², so speed decays like 1/t.
        overlap_eps: Squared-distance cut-off below which a pair exerts
            no electrostatic force. Must be > 0.
        time_scale: Multiplier applied to every dt passed to step().
            Must be >= 0; 0 freezes the simulation.
    """
    k_electrostatic: float = K_ELECTROSTATIC
    k_gravity: float = K_GRAVITY
    k_drag: float = K_DRAG
    enable_electrostatics: bool = True
    enable_gravity: bool = True
    enable_drag: bool = True
    overlap_eps: float = OVERLAP_EPS
    time_scale: float = 1.0

    def __post_init__(self) -> None:
        _require_number("k_electrostatic", self.k_electrostatic)
        _require_number("k_gravity", self.k_gravity)
        _require_number("k_drag", self.k_drag, allow_zero=True)
        _require_number("overlap_eps", self.overlap_eps)
        _require_number("time_scale", self.time_scale, allow_zero=True)
        for name in ("enable_electrostatics", "enable_gravity", "enable_drag"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")

    def replace(self, **changes) -> "SimulationConfig":
        """Return a copy with the given fields changed (validated again)."""
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as e:
            raise ConfigError(str(e)) from e


def _require_number(name: str, value, allow_zero: bool = False) -> None:
    bound = ">= 0" if allow_zero else "> 0"
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise ConfigError(f"{name} must be a finite number {bound}, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{name} must be {bound}, got {value}")

# MIT License (see LICENSE)
"""
Exceptions raised by the particle box core.

Every error is also a ValueError, so callers that only guard against bad
input with ``except ValueError`` keep working.
"""
from __future__ import annotations


class ParticleBoxError(Exception):
    """Base class for all errors raised by particle_box."""


class InvalidParticleError(ParticleBoxError, ValueError):
    """A particle was requested with position, charge or mass out of range."""


class InvalidTimeStepError(ParticleBoxError, ValueError):
    """step() was called with a negative or non-finite dt."""


class ConfigError(ParticleBoxError, ValueError):
    """A simulation setting is out of range or a config file is malformed."""

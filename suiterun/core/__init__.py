"""
Core deterministic primitives.

- Errors: configuration, lifecycle and determinism failures
- Clock: the single asynchronous time request
- Generator: opaque splittable PRNG capability
- Seed: timestamp -> reproducible run seed
- Canonical / IDs: stable serialization and identifiers
"""

from .errors import ConfigurationError, InvalidTransitionError, DeterminismError
from .clock import Clock, SystemClock, DeterministicClock
from .prng import MAX_INT, SplittableGenerator, StdlibGenerator
from .seed import MIN_SEED, derive_seed, unit_seed
from .canonical import canonicalize, canonical_json_str
from .ids import stable_id, stable_int

__all__ = [
    "ConfigurationError",
    "InvalidTransitionError",
    "DeterminismError",
    "Clock",
    "SystemClock",
    "DeterministicClock",
    "MAX_INT",
    "SplittableGenerator",
    "StdlibGenerator",
    "MIN_SEED",
    "derive_seed",
    "unit_seed",
    "canonicalize",
    "canonical_json_str",
    "stable_id",
    "stable_int",
]

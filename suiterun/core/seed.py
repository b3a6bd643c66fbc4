"""
Seed derivation.

A run seed is either supplied explicitly or derived from the startup
timestamp. Re-supplying either one reproduces the run.
"""

from typing import Optional, Sequence

from .ids import stable_int
from .prng import MAX_INT, SplittableGenerator, StdlibGenerator

MIN_SEED = 100


def derive_seed(
    timestamp: float,
    override: Optional[int] = None,
    generator: Optional[SplittableGenerator] = None,
) -> int:
    """
    Resolve the initial seed for a run.

    Args:
        timestamp: Startup time in epoch milliseconds (truncated to int)
        override: Explicit seed; returned verbatim when present
        generator: Generator capability (default: StdlibGenerator)

    Returns:
        Seed in [MIN_SEED, MAX_INT) when derived, or the override
    """
    if override is not None:
        return override
    generator = generator or StdlibGenerator()
    value, _ = generator.step(int(timestamp), MIN_SEED, MAX_INT)
    return value


def unit_seed(
    initial_seed: int,
    labels: Sequence[str],
    generator: Optional[SplittableGenerator] = None,
) -> int:
    """
    Seed for a single fuzz unit.

    Depends only on the run seed and the unit's label path, so filtering
    other units out never changes it.
    """
    generator = generator or StdlibGenerator()
    value, _ = generator.step(initial_seed ^ stable_int(*labels), 0, MAX_INT)
    return value

"""
Tests for seed derivation.

Critical: same timestamp without override must always give the same seed.
"""

from suiterun.core.prng import MAX_INT, StdlibGenerator
from suiterun.core.seed import MIN_SEED, derive_seed, unit_seed

from .spies import SpyGenerator


def test_same_timestamp_same_seed_100_runs():
    """Deriving from one timestamp 100 times must give one seed."""
    seeds = {derive_seed(1700000000123) for _ in range(100)}
    assert len(seeds) == 1


def test_derived_seed_in_range():
    """Derived seeds fall in [MIN_SEED, MAX_INT)."""
    for ts in (0, 1, 42, 1700000000123, 2 ** 40):
        seed = derive_seed(ts)
        assert MIN_SEED <= seed < MAX_INT


def test_timestamp_is_truncated():
    """Fractional milliseconds must not change the seed."""
    assert derive_seed(1700000000123.9) == derive_seed(1700000000123)


def test_override_used_verbatim_without_stepping():
    """An explicit seed bypasses the generator entirely."""
    spy = SpyGenerator()

    assert derive_seed(1700000000123, override=42, generator=spy) == 42
    assert derive_seed(1700000000123, override=0, generator=spy) == 0
    assert spy.calls == []


def test_derivation_steps_once_with_truncated_timestamp():
    """Without override the generator is stepped once, seeded by the timestamp."""
    spy = SpyGenerator()

    derive_seed(1234.5, generator=spy)

    assert spy.calls == [(1234, MIN_SEED, MAX_INT)]


def test_stdlib_generator_is_pure():
    """Same (seed, low, high) must give same (value, next_seed)."""
    gen = StdlibGenerator()
    first = gen.step(99, 0, 1000)

    assert all(gen.step(99, 0, 1000) == first for _ in range(50))
    assert 0 <= first[0] < 1000


def test_unit_seed_depends_on_labels_only():
    """Unit seed is a function of (run seed, label path)."""
    a1 = unit_seed(500, ("Lists", "reverse"))
    a2 = unit_seed(500, ("Lists", "reverse"))
    b = unit_seed(500, ("Lists", "sort"))

    assert a1 == a2
    assert a1 != b

"""
Small suite used by the CLI and host tests.
"""

import random

from suiterun.suite import Expectation, describe, equal, fuzz, skip, test


def _reverse_twice(seed, runs):
    rng = random.Random(seed)
    for _ in range(runs):
        xs = [rng.randint(-100, 100) for _ in range(rng.randint(0, 8))]
        outcome = equal(xs, list(reversed(list(reversed(xs)))))
        if not outcome.passed:
            return [outcome.with_given(xs)]
    return [Expectation.ok()]


SUITE = describe(
    "Sample",
    describe(
        "Arithmetic",
        test("addition", lambda: [equal(4, 2 + 2)]),
        test("subtraction", lambda: [equal(0, 2 - 2)]),
    ),
    describe("Lists", fuzz("reverse twice is identity", _reverse_twice)),
    skip(test("pending", lambda: [Expectation.fail("not written yet")])),
)


def build():
    return SUITE


def broken():
    raise RuntimeError("suite construction failed")

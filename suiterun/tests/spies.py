"""
Instrumented collaborators for tests.
"""

from suiterun.core.prng import SplittableGenerator, StdlibGenerator
from suiterun.lifecycle.delegate import Delegate


class SpyGenerator(SplittableGenerator):
    """Delegates to StdlibGenerator and records every step call."""

    def __init__(self):
        self.calls = []
        self._inner = StdlibGenerator()

    def step(self, seed, low, high):
        self.calls.append((seed, low, high))
        return self._inner.step(seed, low, high)


class RecordingDelegate(Delegate):
    """Stores the payload and counts updates; state is (payload, updates)."""

    def __init__(self):
        self.inits = []
        self.updates = []

    def init(self, payload):
        self.inits.append(payload)
        return (payload, 0), None

    def update(self, message, state):
        self.updates.append(message)
        payload, count = state
        return (payload, count + 1), None

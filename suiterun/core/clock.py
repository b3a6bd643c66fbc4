"""
Clock sources for the startup time request.

The lifecycle asks for the current time exactly once; everything after that
is derived from the returned value.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Clock(ABC):
    """Asynchronous source of the current time in epoch milliseconds."""

    @abstractmethod
    async def now(self) -> int:
        ...


class SystemClock(Clock):
    """Wall-clock time."""

    async def now(self) -> int:
        return int(time.time() * 1000)


@dataclass(frozen=True)
class DeterministicClock(Clock):
    """
    Deterministic time source.

    In tests: construct with a fixed value, or tick manually.
    Replaying a run with the same value reproduces the same seed.
    """
    current: int = 0

    async def now(self) -> int:
        """Get current timestamp without advancing."""
        return self.current

    def tick(self, step: int = 1) -> "DeterministicClock":
        """
        Advance clock by step and return new clock instance.

        Since DeterministicClock is immutable, this returns a new instance.
        """
        return DeterministicClock(self.current + step)

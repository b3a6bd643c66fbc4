"""
Assertion outcomes returned by unit thunks.

Failures are data handed to the delegate, never exceptions.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Expectation:
    """
    Result of one assertion.

    Fields:
        passed: Whether the assertion held
        description: Human-readable description of the failed check
        reason: Machine-friendly failure kind (e.g. "equality")
        given: Fuzz input that produced the failure, rendered as text
    """
    passed: bool
    description: str = ""
    reason: Optional[str] = None
    given: Optional[str] = None

    @staticmethod
    def ok() -> "Expectation":
        return Expectation(passed=True)

    @staticmethod
    def fail(description: str, reason: Optional[str] = None, given: Optional[str] = None) -> "Expectation":
        return Expectation(passed=False, description=description, reason=reason, given=given)

    def with_given(self, given: Any) -> "Expectation":
        """Attach the fuzz input to a failure; passes are returned unchanged."""
        if self.passed:
            return self
        return Expectation(passed=False, description=self.description, reason=self.reason, given=repr(given))


def equal(expected: Any, actual: Any) -> Expectation:
    if expected == actual:
        return Expectation.ok()
    return Expectation.fail(f"Expected {expected!r}, got {actual!r}", reason="equality")

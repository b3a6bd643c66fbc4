"""
Exception types for test orchestration.
"""


class ConfigurationError(Exception):
    """Raised when startup flags or filter patterns are invalid."""
    pass


class InvalidTransitionError(Exception):
    """Raised when a lifecycle message arrives in a state that cannot accept it."""

    def __init__(self, fault) -> None:
        super().__init__(fault.reason)
        self.fault = fault


class DeterminismError(Exception):
    """Raised when determinism guarantee is violated (e.g. a unit runs twice)."""
    pass

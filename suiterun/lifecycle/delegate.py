"""
Delegate contract and reference delegates.

The delegate owns everything after initialization: when units run, what
their outcomes mean, how they are reported. The lifecycle never looks inside
delegate state.

A command is either None (nothing to do) or a zero-argument callable whose
return value (or awaited value) is the next message for the delegate.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, FrozenSet, Optional, Tuple

from ..suite.outcomes import Expectation
from .payload import StartupPayload

Command = Optional[Callable[[], Any]]


class Delegate(ABC):
    """
    Runner-specific collaborator.

    All implementations must:
    - return (state, command) from init and update
    - treat the payload's units as run-at-most-once
    """

    @abstractmethod
    def init(self, payload: StartupPayload) -> Tuple[Any, Command]:
        ...

    @abstractmethod
    def update(self, message: Any, state: Any) -> Tuple[Any, Command]:
        ...

    def subscriptions(self, state: Any) -> FrozenSet[Any]:
        return frozenset()


class PlanDelegate(Delegate):
    """Keeps the payload as its state and never runs anything."""

    def init(self, payload: StartupPayload) -> Tuple[StartupPayload, Command]:
        return payload, None

    def update(self, message: Any, state: StartupPayload) -> Tuple[StartupPayload, Command]:
        return state, None


@dataclass(frozen=True)
class UnitFinished:
    """Message: unit at `index` ran and produced `outcomes`."""
    index: int
    unit_id: str
    outcomes: Tuple[Expectation, ...]


@dataclass(frozen=True)
class SequentialState:
    payload: StartupPayload
    finished: Tuple[UnitFinished, ...] = ()

    @property
    def done(self) -> bool:
        return len(self.finished) == len(self.payload.units)


class SequentialDelegate(Delegate):
    """
    Runs units one at a time, in declaration order.

    Each command invokes exactly one unit; its UnitFinished message schedules
    the next. Outcomes are recorded as-is.
    """

    def init(self, payload: StartupPayload) -> Tuple[SequentialState, Command]:
        state = SequentialState(payload=payload)
        return state, self._next(state)

    def update(self, message: Any, state: SequentialState) -> Tuple[SequentialState, Command]:
        if not isinstance(message, UnitFinished) or message.index != len(state.finished):
            return state, None
        state = replace(state, finished=state.finished + (message,))
        return state, self._next(state)

    @staticmethod
    def _next(state: SequentialState) -> Command:
        index = len(state.finished)
        if index >= len(state.payload.units):
            return None
        unit = state.payload.units[index]

        def run_unit() -> UnitFinished:
            return UnitFinished(index=index, unit_id=unit.unit_id, outcomes=tuple(unit.run()))

        return run_unit

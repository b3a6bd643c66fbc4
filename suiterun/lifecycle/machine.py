"""
Lifecycle state machine.

Two states, one legal initialization:

    Uninitialized(config) --Init(time)--> Initialized(delegate_state)
    Initialized --DelegateMsg--> Initialized   (forwarded to delegate.update)

Any other (state, message) pair is a Fault. `transition` is pure and returns
the Fault as a value; `Lifecycle.dispatch` turns it into an
InvalidTransitionError and leaves its model untouched.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple, Type, Union

from ..core.errors import InvalidTransitionError
from ..core.prng import SplittableGenerator, StdlibGenerator
from ..logging_config import get_logger
from ..suite.filters import FilterPipeline
from ..suite.tree import Node
from .config import StartupConfig
from .delegate import Command, Delegate
from .payload import build_payload

logger = get_logger(__name__)

MESSAGE_BEFORE_INIT = "message delivered before initialization"
DOUBLE_INIT = "initialization attempted twice"


@dataclass(frozen=True)
class Uninitialized:
    config: StartupConfig


@dataclass(frozen=True)
class Initialized:
    delegate_state: Any


Model = Union[Uninitialized, Initialized]


@dataclass(frozen=True)
class Init:
    """Startup time has resolved (epoch milliseconds)."""
    time: float


@dataclass(frozen=True)
class DelegateMsg:
    message: Any


Msg = Union[Init, DelegateMsg]


@dataclass(frozen=True)
class Advanced:
    model: Model
    command: Command


@dataclass(frozen=True)
class Fault:
    """Illegal transition; carries why and where."""
    reason: str
    state: str
    message: str


Transition = Union[Advanced, Fault]


@dataclass(frozen=True)
class Context:
    """Fixed inputs of every transition."""
    suite: Optional[Node]
    delegate: Delegate
    pipeline: FilterPipeline
    generator: SplittableGenerator


Handler = Callable[[Any, Any, Context], Advanced]


def _on_init(model: Uninitialized, msg: Init, ctx: Context) -> Advanced:
    payload = build_payload(model.config, ctx.suite, msg.time, ctx.pipeline, ctx.generator)
    state, command = ctx.delegate.init(payload)
    return Advanced(Initialized(state), command)


def _on_delegate(model: Initialized, msg: DelegateMsg, ctx: Context) -> Advanced:
    state, command = ctx.delegate.update(msg.message, model.delegate_state)
    return Advanced(Initialized(state), command)


_TRANSITIONS: Dict[Tuple[Type, Type], Handler] = {
    (Uninitialized, Init): _on_init,
    (Initialized, DelegateMsg): _on_delegate,
}

_FAULTS: Dict[Tuple[Type, Type], str] = {
    (Uninitialized, DelegateMsg): MESSAGE_BEFORE_INIT,
    (Initialized, Init): DOUBLE_INIT,
}


def transition(model: Model, msg: Msg, ctx: Context) -> Transition:
    """
    Compute the next model and command for `msg`.

    Returns:
        Advanced on a legal transition, Fault otherwise (model is not touched)
    """
    key = (type(model), type(msg))
    handler = _TRANSITIONS.get(key)
    if handler is None:
        reason = _FAULTS.get(key, f"no transition for {key[1].__name__}")
        return Fault(reason=reason, state=key[0].__name__, message=key[1].__name__)
    return handler(model, msg, ctx)


class Lifecycle:
    """
    Stateful holder of the lifecycle model.

    Usage:
        lifecycle = Lifecycle(decode_flags(flags), suite, SequentialDelegate())
        command = lifecycle.init(start_time_ms)
        command = lifecycle.send(message)

    Construction compiles the filter patterns, so a ConfigurationError
    surfaces before the startup time is even requested.
    """

    def __init__(
        self,
        config: StartupConfig,
        suite: Optional[Node],
        delegate: Delegate,
        generator: Optional[SplittableGenerator] = None,
    ) -> None:
        self._context = Context(
            suite=suite,
            delegate=delegate,
            pipeline=FilterPipeline(config.filters),
            generator=generator or StdlibGenerator(),
        )
        self._model: Model = Uninitialized(config)

    @property
    def model(self) -> Model:
        return self._model

    @property
    def initialized(self) -> bool:
        return isinstance(self._model, Initialized)

    def dispatch(self, msg: Msg) -> Command:
        """
        Apply `msg`.

        Raises:
            InvalidTransitionError: On a Fault; the model is unchanged
        """
        result = transition(self._model, msg, self._context)
        if isinstance(result, Fault):
            logger.error("Lifecycle fault in %s on %s: %s", result.state, result.message, result.reason)
            raise InvalidTransitionError(result)
        self._model = result.model
        return result.command

    def init(self, time: float) -> Command:
        return self.dispatch(Init(time))

    def send(self, message: Any) -> Command:
        return self.dispatch(DelegateMsg(message))

    def subscriptions(self) -> FrozenSet[Any]:
        if isinstance(self._model, Initialized):
            return self._context.delegate.subscriptions(self._model.delegate_state)
        return frozenset()

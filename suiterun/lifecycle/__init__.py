"""
Startup configuration, payload and the guarded two-state lifecycle.
"""

from .config import DEFAULT_FUZZ_RUNS, ReportKind, StartupConfig, Flags, decode_flags
from .payload import StartupPayload, build_payload
from .delegate import (
    Command,
    Delegate,
    PlanDelegate,
    SequentialDelegate,
    SequentialState,
    UnitFinished,
)
from .machine import (
    MESSAGE_BEFORE_INIT,
    DOUBLE_INIT,
    Uninitialized,
    Initialized,
    Init,
    DelegateMsg,
    Advanced,
    Fault,
    Context,
    transition,
    Lifecycle,
)
from .program import Program, run_program

__all__ = [
    "DEFAULT_FUZZ_RUNS",
    "ReportKind",
    "StartupConfig",
    "Flags",
    "decode_flags",
    "StartupPayload",
    "build_payload",
    "Command",
    "Delegate",
    "PlanDelegate",
    "SequentialDelegate",
    "SequentialState",
    "UnitFinished",
    "MESSAGE_BEFORE_INIT",
    "DOUBLE_INIT",
    "Uninitialized",
    "Initialized",
    "Init",
    "DelegateMsg",
    "Advanced",
    "Fault",
    "Context",
    "transition",
    "Lifecycle",
    "Program",
    "run_program",
]

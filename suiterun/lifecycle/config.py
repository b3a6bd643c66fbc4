"""
Startup configuration and flags decoding.

Flags arrive as a structured value (null or an object decoded from JSON) and
are validated with pydantic. Any failure is a ConfigurationError raised
before a single unit runs.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from ..core.errors import ConfigurationError
from ..suite.filters import FilterSpec

DEFAULT_FUZZ_RUNS = 100

_INT_RE = re.compile(r"[+-]?\d+")


class ReportKind(str, Enum):
    JSON = "json"
    CHALK = "chalk"
    JUNIT = "junit"


@dataclass(frozen=True)
class StartupConfig:
    """
    Validated startup configuration.

    Fields:
        seed: Explicit seed override (None = derive from startup time)
        fuzz_runs: Trials per fuzz unit
        report: Report kind passed through to the delegate
        filters: Ordered filter steps (at most one include, one exclude)
        paths: Test file paths, passed through untouched
    """
    seed: Optional[int] = None
    fuzz_runs: int = DEFAULT_FUZZ_RUNS
    report: ReportKind = ReportKind.CHALK
    filters: Tuple[FilterSpec, ...] = ()
    paths: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "paths", tuple(self.paths))
        if self.fuzz_runs < 1:
            raise ConfigurationError(f"Invalid --fuzz argument: {self.fuzz_runs}")
        for include in (True, False):
            if sum(1 for f in self.filters if f.include is include) > 1:
                flag = "include" if include else "exclude"
                raise ConfigurationError(f"At most one --{flag} filter is allowed")

    def _pattern(self, include: bool) -> Optional[str]:
        for spec in self.filters:
            if spec.include is include:
                return spec.pattern
        return None

    @property
    def include(self) -> Optional[str]:
        return self._pattern(True)

    @property
    def exclude(self) -> Optional[str]:
        return self._pattern(False)


class Flags(BaseModel):
    """Wire shape of the startup flags object."""

    model_config = ConfigDict(extra="ignore")

    seed: Optional[int] = None
    paths: List[str] = Field(default_factory=list)
    report: ReportKind = ReportKind.CHALK
    fuzz: Optional[StrictInt] = Field(default=None, gt=0)
    include: Optional[str] = None
    exclude: Optional[str] = None

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_from_string(cls, value: Any) -> Optional[int]:
        # Wire format: integer-encoded string.
        if value is None:
            return None
        if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
            return int(value)
        raise ValueError(f"Invalid --seed argument: {value}")

    @field_validator("report", mode="before")
    @classmethod
    def _known_report(cls, value: Any) -> ReportKind:
        try:
            return ReportKind(value)
        except ValueError:
            raise ValueError(f"Invalid --report argument: {value}") from None


def _describe(error: ValidationError) -> str:
    messages = []
    for err in error.errors():
        cause = err.get("ctx", {}).get("error")
        if cause is not None:
            messages.append(str(cause))
        else:
            loc = ".".join(str(part) for part in err["loc"])
            messages.append(f"Invalid --{loc} argument: {err['msg']}")
    return "; ".join(messages)


def decode_flags(value: Optional[Mapping[str, Any]]) -> StartupConfig:
    """
    Decode the structured startup flags.

    Args:
        value: None for defaults, or a mapping with seed/paths/report
               (and optionally fuzz/include/exclude)

    Returns:
        StartupConfig; include/exclude keep the order their keys appear in

    Raises:
        ConfigurationError: If any field is invalid
    """
    if value is None:
        return StartupConfig()
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Invalid flags: expected null or an object, got {type(value).__name__}")

    try:
        flags = Flags.model_validate(dict(value))
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e

    patterns = {"include": flags.include, "exclude": flags.exclude}
    filters = tuple(
        FilterSpec(include=(key == "include"), pattern=patterns[key])
        for key in value
        if key in patterns and patterns[key] is not None
    )
    return StartupConfig(
        seed=flags.seed,
        fuzz_runs=flags.fuzz if flags.fuzz is not None else DEFAULT_FUZZ_RUNS,
        report=flags.report,
        filters=filters,
        paths=tuple(flags.paths),
    )

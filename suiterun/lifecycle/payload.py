"""
Startup payload handed to the delegate on initialization.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.prng import SplittableGenerator
from ..core.seed import derive_seed
from ..logging_config import get_logger
from ..suite.filters import FilterPipeline
from ..suite.flatten import LabeledUnit, RunMode, flatten, select_units
from ..suite.tree import Node
from .config import ReportKind, StartupConfig


@dataclass(frozen=True)
class StartupPayload:
    initial_seed: int
    fuzz_runs: int
    start_time: float
    paths: Tuple[str, ...]
    include: Optional[str]
    exclude: Optional[str]
    units: Tuple[LabeledUnit, ...]
    report: ReportKind
    mode: RunMode = RunMode.PLAIN

    def to_dict(self) -> Dict[str, Any]:
        """Plan description (no thunks), suitable for canonical_json_str."""
        return {
            "initial_seed": self.initial_seed,
            "fuzz_runs": self.fuzz_runs,
            "start_time": self.start_time,
            "paths": list(self.paths),
            "include": self.include,
            "exclude": self.exclude,
            "report": self.report,
            "mode": self.mode,
            "units": [u.describe() for u in self.units],
        }


def build_payload(
    config: StartupConfig,
    suite: Optional[Node],
    start_time: float,
    pipeline: FilterPipeline,
    generator: SplittableGenerator,
) -> StartupPayload:
    """
    Seed, filter and flatten a suite into the startup payload.

    Runs once per process, when the lifecycle receives Init.
    """
    seed = derive_seed(start_time, override=config.seed, generator=generator)
    logger = get_logger(__name__, run_id=str(seed))
    if config.seed is None:
        logger.info("Derived seed %d from start time %d", seed, int(start_time))

    units = flatten(pipeline.apply(suite), seed, config.fuzz_runs, generator)
    mode, selected = select_units(units)
    logger.info("Planned %d of %d units (mode=%s)", len(selected), len(units), mode.value)

    return StartupPayload(
        initial_seed=seed,
        fuzz_runs=config.fuzz_runs,
        start_time=start_time,
        paths=config.paths,
        include=config.include,
        exclude=config.exclude,
        units=tuple(selected),
        report=config.report,
        mode=mode,
    )

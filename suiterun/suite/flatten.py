"""
Flattener: suite tree -> ordered labeled units.

Traversal is depth-first, left to right, driven by an explicit work stack.
No unit body is invoked while flattening.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import DeterminismError
from ..core.ids import stable_id
from ..core.prng import SplittableGenerator
from ..core.seed import unit_seed
from .outcomes import Expectation
from .tree import Batch, Labeled, Leaf, Node, Only, Skip


class Focus(Enum):
    PLAIN = "plain"
    ONLY = "only"
    SKIP = "skip"


class RunMode(Enum):
    """Which units a run executes: all, only focused ones, or all but skipped."""
    PLAIN = "plain"
    ONLY = "only"
    SKIPPING = "skipping"


class Thunk:
    """
    Deferred unit computation.

    Holds the body and its bound arguments; nothing runs until the thunk is
    called, and it may be called once. A body that raises yields a failed
    Expectation instead of propagating.
    """

    def __init__(self, body, *args: Any) -> None:
        self._body = body
        self._args = args
        self._invoked = False

    @property
    def invoked(self) -> bool:
        return self._invoked

    def __call__(self) -> List[Expectation]:
        if self._invoked:
            raise DeterminismError("unit thunk invoked more than once")
        self._invoked = True
        try:
            return list(self._body(*self._args))
        except Exception as e:
            return [Expectation.fail(f"Test raised {type(e).__name__}: {e}", reason="exception")]


@dataclass(frozen=True)
class LabeledUnit:
    """
    One executable leaf with its ancestor labels.

    Fields:
        labels: Label path, outermost first
        thunk: Deferred computation producing assertion outcomes
        unit_id: stable_id of the label path; the n-th repeat of a path
                 (n >= 1) hashes the path plus "#n"
        focus: Skip/only marking inherited from the tree
        seed: Per-unit seed (fuzz units only)
    """
    labels: Tuple[str, ...]
    thunk: Thunk
    unit_id: str
    focus: Focus = Focus.PLAIN
    seed: Optional[int] = None

    def run(self) -> List[Expectation]:
        return self.thunk()

    def describe(self) -> Dict[str, Any]:
        return {
            "id": self.unit_id,
            "labels": list(self.labels),
            "focus": self.focus.value,
            "seed": self.seed,
        }


def _inner_focus(outer: Focus, node: Node) -> Focus:
    if isinstance(node, Skip) or outer is Focus.SKIP:
        return Focus.SKIP
    if isinstance(node, Only):
        return Focus.ONLY
    return outer


def flatten(
    tree: Optional[Node],
    initial_seed: int,
    fuzz_runs: int,
    generator: Optional[SplittableGenerator] = None,
) -> List[LabeledUnit]:
    """
    Flatten a (possibly filtered) tree into units in declaration order.

    Args:
        tree: Suite tree, or None when filtering removed everything
        initial_seed: Run seed; fuzz units derive their own seed from it
        fuzz_runs: Trials per fuzz unit, bound into the thunk
        generator: Generator capability for per-unit seeds

    Returns:
        Units, one per Leaf, none of them invoked
    """
    if tree is None:
        return []

    units: List[LabeledUnit] = []
    seen: Dict[Tuple[str, ...], int] = {}
    stack: List[Tuple[Node, Tuple[str, ...], Focus]] = [(tree, (), Focus.PLAIN)]
    while stack:
        node, labels, focus = stack.pop()
        if isinstance(node, Leaf):
            occurrence = seen.get(labels, 0)
            seen[labels] = occurrence + 1
            key = labels if occurrence == 0 else labels + (f"#{occurrence}",)
            units.append(_to_unit(node, labels, key, focus, initial_seed, fuzz_runs, generator))
        elif isinstance(node, Labeled):
            stack.append((node.subtree, labels + (node.label,), focus))
        elif isinstance(node, Batch):
            # Reversed so the leftmost child is popped first.
            stack.extend((child, labels, focus) for child in reversed(node.children))
        elif isinstance(node, (Skip, Only)):
            stack.append((node.subtree, labels, _inner_focus(focus, node)))
        else:
            raise TypeError(f"Not a suite node: {node!r}")
    return units


def _to_unit(
    leaf: Leaf,
    labels: Tuple[str, ...],
    key: Tuple[str, ...],
    focus: Focus,
    initial_seed: int,
    fuzz_runs: int,
    generator: Optional[SplittableGenerator],
) -> LabeledUnit:
    if leaf.fuzz:
        seed = unit_seed(initial_seed, key, generator)
        return LabeledUnit(labels, Thunk(leaf.body, seed, fuzz_runs), stable_id(*key), focus, seed)
    return LabeledUnit(labels, Thunk(leaf.body), stable_id(*key), focus)


def select_units(units: List[LabeledUnit]) -> Tuple[RunMode, List[LabeledUnit]]:
    """
    Apply skip/only focus.

    Any focused unit restricts the run to focused units; otherwise skipped
    units are removed. Order is preserved.
    """
    if any(u.focus is Focus.ONLY for u in units):
        return RunMode.ONLY, [u for u in units if u.focus is Focus.ONLY]
    if any(u.focus is Focus.SKIP for u in units):
        return RunMode.SKIPPING, [u for u in units if u.focus is not Focus.SKIP]
    return RunMode.PLAIN, list(units)

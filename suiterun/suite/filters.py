"""
Filter pipeline: ordered include/exclude narrowing of a suite tree.

Filters are folded left to right; each step prunes the output of the
previous one. Patterns are compiled up front so a bad pattern is reported
before any traversal.
"""

import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from ..core.errors import ConfigurationError
from .tree import Labeled, Leaf, Node, children_of, rebuild

Keep = Callable[[Tuple[str, ...]], bool]


@dataclass(frozen=True)
class FilterSpec:
    """
    One filter step.

    Fields:
        include: Keep matching leaves (True) or drop them (False)
        pattern: Regular expression searched in the leaf's label path
    """
    include: bool
    pattern: str

    @property
    def flag(self) -> str:
        return "include" if self.include else "exclude"


def label_path(labels: Sequence[str]) -> str:
    """Full concatenated label path that patterns are matched against."""
    return " ".join(labels)


class _Frame:
    __slots__ = ("node", "inner", "pending", "kept")

    def __init__(self, node: Node, labels: Tuple[str, ...]) -> None:
        self.node = node
        self.inner = labels + (node.label,) if isinstance(node, Labeled) else labels
        self.pending = iter(children_of(node))
        self.kept: List[Node] = []


def prune(tree: Optional[Node], keep: Keep) -> Optional[Node]:
    """
    Drop leaves whose label path fails `keep`, and any branch left empty.

    Iterative post-order walk; nesting depth is bounded only by memory.
    Returns None when no leaf survives.
    """
    if tree is None:
        return None
    if isinstance(tree, Leaf):
        return tree if keep(()) else None

    stack = [_Frame(tree, ())]
    result: Optional[Node] = None
    while stack:
        frame = stack[-1]
        child = next(frame.pending, None)
        if child is not None:
            if isinstance(child, Leaf):
                if keep(frame.inner):
                    frame.kept.append(child)
            else:
                stack.append(_Frame(child, frame.inner))
            continue

        stack.pop()
        rebuilt = rebuild(frame.node, frame.kept)
        if stack:
            if rebuilt is not None:
                stack[-1].kept.append(rebuilt)
        else:
            result = rebuilt
    return result


def _keeper(include: bool, regex: Pattern) -> Keep:
    def keep(labels: Tuple[str, ...]) -> bool:
        return (regex.search(label_path(labels)) is not None) == include

    return keep


class FilterPipeline:
    """
    Compiled, ordered filter steps.

    Usage:
        pipeline = FilterPipeline([FilterSpec(True, "Parser"), FilterSpec(False, "slow")])
        filtered = pipeline.apply(suite)

    Raises:
        ConfigurationError: On construction, if any pattern does not compile
    """

    def __init__(self, specs: Sequence[FilterSpec] = ()) -> None:
        self.specs: Tuple[FilterSpec, ...] = tuple(specs)
        self._steps: List[Keep] = []
        for spec in self.specs:
            try:
                regex = re.compile(spec.pattern)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid --{spec.flag} pattern {spec.pattern!r}: {e}"
                ) from e
            self._steps.append(_keeper(spec.include, regex))

    def __len__(self) -> int:
        return len(self._steps)

    def apply(self, tree: Optional[Node]) -> Optional[Node]:
        """Left fold of the steps over `tree`; no steps returns `tree` itself."""
        return reduce(prune, self._steps, tree)


def apply_filters(specs: Sequence[FilterSpec], tree: Optional[Node]) -> Optional[Node]:
    return FilterPipeline(specs).apply(tree)

"""
Suite trees, filtering and flattening.
"""

from .outcomes import Expectation, equal
from .tree import Leaf, Labeled, Batch, Skip, Only, Node, test, fuzz, batch, describe, skip, only
from .filters import FilterSpec, FilterPipeline, apply_filters, label_path, prune
from .flatten import Focus, RunMode, Thunk, LabeledUnit, flatten, select_units

__all__ = [
    "Expectation",
    "equal",
    "Leaf",
    "Labeled",
    "Batch",
    "Skip",
    "Only",
    "Node",
    "test",
    "fuzz",
    "batch",
    "describe",
    "skip",
    "only",
    "FilterSpec",
    "FilterPipeline",
    "apply_filters",
    "label_path",
    "prune",
    "Focus",
    "RunMode",
    "Thunk",
    "LabeledUnit",
    "flatten",
    "select_units",
]

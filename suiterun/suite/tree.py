"""
Suite tree model.

A suite is an immutable tree built once, before filtering or flattening:

    Leaf      one test body (plain or fuzz)
    Labeled   names its subtree
    Batch     groups subtrees in declaration order
    Skip      marks its subtree as not to be run
    Only      focuses the run on its subtree
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .outcomes import Expectation

# Plain body: () -> outcomes.  Fuzz body: (seed, runs) -> outcomes.
Body = Callable[..., List[Expectation]]


@dataclass(frozen=True, eq=False)
class Leaf:
    body: Body
    fuzz: bool = False


@dataclass(frozen=True)
class Labeled:
    label: str
    subtree: "Node"


@dataclass(frozen=True)
class Batch:
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Skip:
    subtree: "Node"


@dataclass(frozen=True)
class Only:
    subtree: "Node"


Node = Union[Leaf, Labeled, Batch, Skip, Only]


def children_of(node: Node) -> Tuple[Node, ...]:
    if isinstance(node, Batch):
        return node.children
    if isinstance(node, (Labeled, Skip, Only)):
        return (node.subtree,)
    return ()


def rebuild(node: Node, kept: Sequence[Node]) -> Optional[Node]:
    """
    Rebuild a branch around its surviving children.

    Returns None when nothing survived, and the original node when every
    child survived unchanged.
    """
    if not kept:
        return None
    original = children_of(node)
    if len(kept) == len(original) and all(a is b for a, b in zip(kept, original)):
        return node
    if isinstance(node, Batch):
        return Batch(tuple(kept))
    if isinstance(node, Labeled):
        return Labeled(node.label, kept[0])
    if isinstance(node, Skip):
        return Skip(kept[0])
    if isinstance(node, Only):
        return Only(kept[0])
    raise TypeError(f"Not a branch node: {node!r}")


def test(label: str, body: Callable[[], List[Expectation]]) -> Labeled:
    return Labeled(label, Leaf(body))


# Keep pytest from collecting the builder when it is imported into a test module.
test.__test__ = False


def fuzz(label: str, body: Callable[[int, int], List[Expectation]]) -> Labeled:
    """Property test; body receives (seed, runs)."""
    return Labeled(label, Leaf(body, fuzz=True))


def batch(*children: Node) -> Batch:
    return Batch(children)


def describe(label: str, *children: Node) -> Labeled:
    return Labeled(label, Batch(children))


def skip(node: Node) -> Skip:
    return Skip(node)


def only(node: Node) -> Only:
    return Only(node)

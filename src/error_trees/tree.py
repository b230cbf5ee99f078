"""Error tree: zero-or-more underlying errors with attached provenance labels.

A tree has three node kinds:
- Leaf: one underlying error value
- Labeled: one child plus the label of the context it failed in
- Group: ordered, non-empty siblings collected from one batch

Nodes are frozen and slotted. Any raw error converts to a Leaf via into_tree(),
and a node converts to itself, so callers can label raw errors and aggregate
trees the same way.

Example:
    >>> tree = group([with_label("boom", "first"), with_label("bang", "second")])
    >>> [(f.path, f.error) for f in tree.with_label("parent").flatten()]
    [(('first', 'parent'), 'boom'), (('second', 'parent'), 'bang')]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeAlias, TypeVar

from .errors import EmptyGroupError

if TYPE_CHECKING:
    from collections.abc import Iterable

L = TypeVar("L")  # Label type
E = TypeVar("E")  # Underlying error type

ErrorTree: TypeAlias = "Leaf[L, E] | Labeled[L, E] | Group[L, E]"


class _Node(Generic[L, E]):
    """Operations shared by every node kind."""

    __slots__ = ()

    def with_label(self, label: L) -> Labeled[L, E]:
        """Wrap this tree in one more provenance label."""
        return Labeled(label, self)  # type: ignore[arg-type]

    def flatten(self) -> list[FlatError[L, E]]:
        """Flatten into (path, error) pairs, one per leaf, left to right."""
        return flatten_tree(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Leaf(_Node[L, E]):
    """A single underlying error value."""

    error: E


@dataclass(frozen=True, slots=True)
class Labeled(_Node[L, E]):
    """Exactly one child, annotated with the label it failed under.

    A raw error passed as the child is wrapped as a Leaf.
    """

    label: L
    child: ErrorTree

    def __post_init__(self) -> None:
        object.__setattr__(self, "child", into_tree(self.child))


@dataclass(frozen=True, slots=True)
class Group(_Node[L, E]):
    """Sibling failures from one batch, in collection order. Never empty.

    Raw errors among the children are wrapped as Leafs.
    """

    children: tuple[ErrorTree, ...]

    def __post_init__(self) -> None:
        children = tuple(into_tree(c) for c in self.children)
        if not children:
            raise EmptyGroupError()
        object.__setattr__(self, "children", children)

    def __len__(self) -> int:
        return len(self.children)


_NODE_TYPES = (Leaf, Labeled, Group)


@dataclass(frozen=True, slots=True)
class FlatError(Generic[L, E]):
    """One leaf failure with its labels, innermost first."""

    path: tuple[L, ...]
    error: E


# ═══════════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════════


def leaf(error: E) -> Leaf[L, E]:
    """Create a Leaf tree from an error."""
    return Leaf(error)


def is_tree(value: object) -> bool:
    """True if value is already an error tree node."""
    return isinstance(value, _NODE_TYPES)


def into_tree(value: E | ErrorTree) -> ErrorTree:
    """Raw error -> Leaf, tree -> itself. Never fails."""
    return value if isinstance(value, _NODE_TYPES) else Leaf(value)  # type: ignore[return-value]


def with_label(value: E | ErrorTree, label: L) -> Labeled[L, E]:
    """Convert value to a tree and wrap it in label."""
    return Labeled(label, value)


def group(errors: Iterable[E | ErrorTree]) -> Group[L, E]:
    """Group raw errors and/or trees as siblings, preserving order.

    Raises:
        EmptyGroupError: If errors is empty
    """
    return Group(tuple(errors))


# ═══════════════════════════════════════════════════════════════════════════════
# Flattening
# ═══════════════════════════════════════════════════════════════════════════════

# Marks the point in the work stack where a Labeled node's subtree ends
_POP_LABEL = object()


def flatten_tree(tree: ErrorTree) -> list[FlatError[L, E]]:
    """Depth-first, left-to-right flattening of a tree into FlatErrors.

    Each FlatError.path lists the nearest label first and the outermost last.
    Uses an explicit work stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    flat: list[FlatError[L, E]] = []
    labels: list[L] = []  # root-most first
    work: list[object] = [tree]
    while work:
        node = work.pop()
        if node is _POP_LABEL:
            labels.pop()
            continue
        match node:
            case Leaf(error=error):
                flat.append(FlatError(tuple(reversed(labels)), error))
            case Labeled(label=label, child=child):
                labels.append(label)
                work.append(_POP_LABEL)
                work.append(child)
            case Group(children=children):
                work.extend(reversed(children))
            case _:
                raise TypeError(f"Not an error tree node: {node!r}")
    return flat

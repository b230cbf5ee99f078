"""Tests for error tree nodes, conversion and flattening."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from error_trees import (
    EmptyGroupError,
    ErrorCode,
    FlatError,
    Group,
    Labeled,
    Leaf,
    flatten_tree,
    group,
    into_tree,
    is_tree,
    leaf,
    with_label,
)


class Error:
    """Opaque application error without equality or hashing."""

    def __init__(self, msg: str) -> None:
        self.msg = msg

    def __repr__(self) -> str:
        return f"Error({self.msg!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Conversion
# ═════════════════════════════════════════════════════════════════════════════


def test_leaf_constructor() -> None:
    assert leaf("boom") == Leaf("boom")
    assert leaf("boom").error == "boom"


def test_into_tree_wraps_raw_error() -> None:
    """Raw errors become Leafs."""
    err = Error("x")
    tree = into_tree(err)

    assert isinstance(tree, Leaf)
    assert tree.error is err


def test_into_tree_is_identity_on_trees() -> None:
    """Trees convert to themselves, not to a Leaf around a tree."""
    for tree in (Leaf("a"), Labeled("l", Leaf("a")), Group((Leaf("a"),))):
        assert into_tree(tree) is tree


def test_is_tree() -> None:
    assert is_tree(Leaf("a"))
    assert is_tree(Group((Leaf("a"),)))
    assert not is_tree("a")
    assert not is_tree(None)


def test_with_label_function_and_method_agree() -> None:
    assert with_label("e", "ctx") == Labeled("ctx", Leaf("e"))
    assert Leaf("e").with_label("ctx") == Labeled("ctx", Leaf("e"))
    # Already a tree: not re-wrapped as a Leaf
    assert with_label(Leaf("e"), "ctx") == Labeled("ctx", Leaf("e"))


def test_group_converts_mixed_items_in_order() -> None:
    tree = group(["raw", Labeled("l", Leaf("inner")), Leaf("leaf")])

    assert tree.children == (Leaf("raw"), Labeled("l", Leaf("inner")), Leaf("leaf"))
    assert len(tree) == 3


def test_group_children_stored_as_tuple() -> None:
    tree = Group([Leaf("a"), Leaf("b")])  # type: ignore[arg-type]

    assert isinstance(tree.children, tuple)
    assert tree == Group((Leaf("a"), Leaf("b")))


def test_labeled_wraps_raw_child_as_leaf() -> None:
    tree = Labeled("l", "raw")

    assert tree.child == Leaf("raw")
    assert tree.flatten() == [FlatError(("l",), "raw")]


def test_labeled_keeps_tree_child() -> None:
    child = Group((Leaf("a"),))
    assert Labeled("l", child).child is child


def test_group_wraps_raw_children_as_leaves() -> None:
    inner = Labeled("l", Leaf("b"))
    tree = Group(("a", inner, 3))  # type: ignore[arg-type]

    assert tree.children == (Leaf("a"), inner, Leaf(3))
    assert tree.children[1] is inner
    assert [f.error for f in tree.flatten()] == ["a", "b", 3]


def test_empty_group_rejected() -> None:
    with pytest.raises(EmptyGroupError) as exc_info:
        Group(())
    assert exc_info.value.code == ErrorCode.EMPTY_GROUP

    with pytest.raises(ValueError):
        group([])


def test_nodes_are_immutable() -> None:
    tree = Labeled("l", Leaf("e"))
    with pytest.raises(FrozenInstanceError):
        tree.label = "other"  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Flattening
# ═════════════════════════════════════════════════════════════════════════════


def test_flatten_single_leaf_has_empty_path() -> None:
    assert flatten_tree(Leaf("e")) == [FlatError((), "e")]


def test_flatten_nested_labels_innermost_first() -> None:
    tree = Leaf("e").with_label("inner").with_label("middle").with_label("outer")

    assert tree.flatten() == [FlatError(("inner", "middle", "outer"), "e")]


def test_flatten_group_under_label() -> None:
    """The README example: two labeled errors grouped under a parent label."""
    e1, e2 = Error("error1"), Error("error2")
    tree = group([with_label(e1, "label1"), with_label(e2, "label2")]).with_label("parent_label")

    flat = tree.flatten()

    assert [f.path for f in flat] == [("label1", "parent_label"), ("label2", "parent_label")]
    assert flat[0].error is e1
    assert flat[1].error is e2


def test_flatten_labels_do_not_leak_between_siblings() -> None:
    tree = Group((
        Labeled("a", Leaf(1)),
        Leaf(2),
        Labeled("b", Group((Leaf(3), Labeled("c", Leaf(4))))),
        Leaf(5),
    ))

    assert tree.flatten() == [
        FlatError(("a",), 1),
        FlatError((), 2),
        FlatError(("b",), 3),
        FlatError(("c", "b"), 4),
        FlatError((), 5),
    ]


def test_flatten_one_entry_per_leaf_in_leaf_order() -> None:
    tree = Group((
        Group((Leaf("l1"), Leaf("l2"))),
        Labeled("x", Group((Leaf("l3"),))),
        Group((Group((Leaf("l4"),)), Leaf("l5"))),
    ))

    assert [f.error for f in tree.flatten()] == ["l1", "l2", "l3", "l4", "l5"]


def test_flatten_does_not_mutate_tree() -> None:
    tree = group([with_label("a", "x"), with_label("b", "y")]).with_label("root")
    snapshot = repr(tree)

    first = tree.flatten()
    second = tree.flatten()

    assert first == second
    assert repr(tree) == snapshot


def test_flatten_deep_tree_beyond_recursion_limit() -> None:
    """Deep label chains flatten without hitting the recursion limit."""
    import sys

    depth = sys.getrecursionlimit() * 3
    tree = Leaf("deep")
    for i in range(depth):
        tree = Labeled(i, tree)

    (flat,) = flatten_tree(tree)

    assert flat.error == "deep"
    assert len(flat.path) == depth
    assert flat.path[0] == 0
    assert flat.path[-1] == depth - 1


def test_flatten_rejects_non_tree() -> None:
    with pytest.raises(TypeError):
        flatten_tree("not a tree")  # type: ignore[arg-type]


def test_labels_are_opaque() -> None:
    """Labels need no capability beyond being stored."""
    label = object()
    (flat,) = Leaf("e").with_label(label).flatten()
    assert flat.path[0] is label

"""Result type and the batch combinators that build error trees.

Result is a discriminated union for success (Ok) or failure (Err). Failures
are labeled where they happen, batches are partitioned and merged into one
aggregate failure, and the final tree is flattened at the boundary:

    >>> def parent() -> Result[list[int], ErrorTree]:
    ...     batch = [Err("disk full").label_error("first faulty"),
    ...              Err("timeout").label_error("second faulty")]
    ...     return into_result(partition_result(batch)).label_error("parent function")
    >>> [f.path for f in parent().flatten_results().unwrap_err()]
    [('first faulty', 'parent function'), ('second faulty', 'parent function')]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .errors import UnwrapError
from .logging import get_logger
from .tree import ErrorTree, FlatError, Group, Labeled, flatten_tree, group, into_tree

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
L = TypeVar("L")

_OK = True
_ERR = False

logger = get_logger("result")


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").label_error("loading config").unwrap_err()
        Labeled(label='loading config', child=Leaf(error='fail'))
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.on_err(self._value)

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.on_ok(self._value)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.on_err(self._value, msg)

    def ok(self) -> T | None:
        """Some(T) if Ok, None if Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Some(E) if Err, None if Ok."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Error Trees ───────────────────────────────────────────────────

    def label_error(self, label: L) -> Result[T, Labeled]:
        """Attach one level of provenance to an Err, pass Ok through.

        The Err payload may be a raw error (wrapped as a Leaf first) or an
        existing tree. Labels applied later end up further from the leaf:

            >>> Err("x").label_error("inner").label_error("outer").flatten_results().unwrap_err()
            [FlatError(path=('inner', 'outer'), error='x')]
        """
        if self._is_ok:
            return self  # type: ignore[return-value]
        return Result(Labeled(label, into_tree(self._value)), _ERR)

    def flatten_results(self) -> Result[T, list[FlatError]]:
        """Flatten an Err tree into FlatErrors in leaf order. Ok passes through unchanged."""
        if self._is_ok:
            return self  # type: ignore[return-value]
        flat = flatten_tree(into_tree(self._value))
        logger.debug("flattened error tree into %d leaf error(s)", len(flat))
        return Result(flat, _ERR)

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Function Forms
# ═══════════════════════════════════════════════════════════════════════════════


def label_error(result: Result[T, E | ErrorTree], label: L) -> Result[T, Labeled]:
    """Function form of Result.label_error."""
    return result.label_error(label)


def flatten_results(result: Result[T, ErrorTree]) -> Result[T, list[FlatError]]:
    """Function form of Result.flatten_results."""
    return result.flatten_results()


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def partition_result(results: Iterable[Result[T, E | ErrorTree]]) -> tuple[list[T], list[ErrorTree]]:
    """Split results into (successes, failure trees), each in original order.

    Every result lands on exactly one side. Raw Err payloads become Leafs.
    """
    values: list[T] = []
    failures: list[ErrorTree] = []
    for r in results:
        if r._is_ok:
            values.append(r._value)  # type: ignore[arg-type]
        else:
            failures.append(into_tree(r._value))
    logger.debug("partitioned batch: %d ok, %d failed", len(values), len(failures))
    return values, failures


def into_result(partitioned: tuple[list[T], Sequence[E | ErrorTree]]) -> Result[list[T], Group]:
    """Collapse (successes, failures) into one all-or-nothing Result.

    No failures gives Ok(successes) unchanged. Otherwise Err(Group(failures))
    and the successes are dropped. Raw errors among the failures become
    Leafs. A single failure is still wrapped in a Group of one.

    Example:
        >>> into_result(partition_result([Ok(1), Ok(2)]))
        Ok([1, 2])
        >>> into_result(partition_result([Ok(1), Err("e")]))
        Err(Group(children=(Leaf(error='e'),)))
    """
    successes, failures = partitioned
    if not failures:
        return Result(successes, _OK)
    logger.debug("batch failed with %d error tree(s)", len(failures))
    return Result(group(failures), _ERR)


def errors_into_result(errors: Sequence[E | ErrorTree]) -> Result[None, Group]:
    """Ok(None) if errors is empty, else Err of all errors grouped in order."""
    if not errors:
        return Result(None, _OK)
    return Result(group(errors), _ERR)

"""Exceptions raised on misuse of error trees and results.

The library never raises for the failures it represents. These types only
cover programming errors such as building an empty group or unwrapping the
wrong variant of a Result.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable codes for library misuse."""
    EMPTY_GROUP = "EMPTY_GROUP"
    UNWRAP_ON_ERR = "UNWRAP_ON_ERR"
    UNWRAP_ON_OK = "UNWRAP_ON_OK"


class ErrorTreesError(Exception):
    """Base exception for error_trees, tagged with an ErrorCode."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        self.code = code
        super().__init__(message)


class EmptyGroupError(ErrorTreesError, ValueError):
    """A Group node was built from no children."""

    def __init__(self, message: str = "Group requires at least one child") -> None:
        super().__init__(message, ErrorCode.EMPTY_GROUP)


class UnwrapError(ErrorTreesError, RuntimeError):
    """unwrap()/unwrap_err() called on the other variant."""

    def __init__(self, message: str, code: ErrorCode, value: object) -> None:
        self.value = value
        super().__init__(message, code)

    @classmethod
    def on_err(cls, value: object, msg: str = "unwrap() on Err") -> UnwrapError:
        return cls(f"{msg}: {value!r}", ErrorCode.UNWRAP_ON_ERR, value)

    @classmethod
    def on_ok(cls, value: object, msg: str = "unwrap_err() on Ok") -> UnwrapError:
        return cls(f"{msg}: {value!r}", ErrorCode.UNWRAP_ON_OK, value)

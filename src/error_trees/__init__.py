"""error_trees - collect every failure instead of stopping at the first one.

Instead of returning early with the first error, store the errors of a batch
in a tree, label each one with where it happened, and flatten the tree into a
list of (path, error) pairs when the caller needs to look at them.

Quick Start:
    >>> from error_trees import Err, Ok, into_result, partition_result
    >>>
    >>> def faulty(msg: str):
    ...     return Err(msg)
    >>>
    >>> def parent_function():
    ...     first = faulty("error1").label_error("first faulty")
    ...     second = faulty("error2").label_error("second faulty")
    ...     batch = into_result(partition_result([first, second]))
    ...     return batch.label_error("parent function")
    >>>
    >>> for flat in parent_function().flatten_results().unwrap_err():
    ...     print(flat.path, flat.error)
    ('first faulty', 'parent function') error1
    ('second faulty', 'parent function') error2

Logging:
    The package logs DEBUG records under the ``error_trees`` logger.
    ``configure_logging()`` applies ERROR_TREES_LOG_LEVEL to it.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import EmptyGroupError, ErrorCode, ErrorTreesError, UnwrapError
from .logging import configure_logging, get_logger
from .result import (
    Err,
    Ok,
    Result,
    errors_into_result,
    flatten_results,
    into_result,
    label_error,
    partition_result,
)
from .settings import ErrorTreesSettings, LoggingSettings, clear_settings_cache, get_settings
from .tree import (
    ErrorTree,
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

__all__ = [
    "__version__",
    # Tree
    "ErrorTree", "Leaf", "Labeled", "Group", "FlatError",
    "leaf", "group", "into_tree", "is_tree", "with_label", "flatten_tree",
    # Result
    "Result", "Ok", "Err",
    # Combinators
    "label_error", "partition_result", "into_result", "errors_into_result", "flatten_results",
    # Errors
    "ErrorCode", "ErrorTreesError", "EmptyGroupError", "UnwrapError",
    # Config & logging
    "ErrorTreesSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    "get_logger", "configure_logging",
]

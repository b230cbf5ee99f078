"""Logger factory for error_trees modules.

All loggers live under the ``error_trees`` namespace and only emit DEBUG
records. Applications decide where those go; the package installs a
NullHandler so nothing is printed unless the caller configures logging.
"""

from __future__ import annotations

import logging

from .settings import get_settings

ROOT_LOGGER = "error_trees"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger for ``error_trees.<name>`` (or the package logger when name is None)."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply level and propagation from settings to the package logger.

    An explicit ``level`` overrides ERROR_TREES_LOG_LEVEL.
    """
    cfg = get_settings().logging
    log = logging.getLogger(ROOT_LOGGER)
    if level is None:
        level = cfg.level
    log.setLevel(level.upper() if isinstance(level, str) else level)
    log.propagate = cfg.propagate
    if not any(isinstance(h, logging.NullHandler) for h in log.handlers):
        log.addHandler(logging.NullHandler())
    return log

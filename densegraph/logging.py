"""Loggers for densegraph modules.

Every module logs through ``get_logger(__name__)``. Loggers live under the
``densegraph`` namespace, write to stderr and do not propagate, so library
output stays quiet (WARNING) unless the caller turns it up.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_PACKAGE = "densegraph"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_default_level = logging.WARNING
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE or name.startswith(_PACKAGE + "."):
        return name or _PACKAGE
    return f"{_PACKAGE}.{name}"


def _attach_handler(
    logger: logging.Logger, level: int, stream: TextIO, fmt: str
) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for a module.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are prefixed with ``densegraph.``; None gives the package logger.

    Example:
        >>> logger = get_logger("densegraph.shortest")
        >>> logger.debug("dijkstra: vertex %d unreachable from %d", 3, 0)
    """
    qualified = _qualify(name)
    if qualified in _loggers:
        return _loggers[qualified]

    logger = logging.getLogger(qualified)
    if not logger.handlers:
        logger.setLevel(_default_level)
        _attach_handler(logger, _default_level, sys.stderr, _DEFAULT_FORMAT)
        logger.propagate = False

    _loggers[qualified] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every densegraph logger, existing and future.

    Args:
        level: A ``logging`` constant or its name, e.g. ``"DEBUG"``.
    """
    global _default_level
    _default_level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers:
            handler.setLevel(_default_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Send densegraph log output to a new stream and format.

    Existing handlers are replaced, so calling this twice does not duplicate
    records.

    Args:
        level: Level for all densegraph loggers (default WARNING).
        format_string: Record format; ``[LEVEL] name: message`` by default.
        stream: Destination; stderr by default.
    """
    global _default_level
    _default_level = _coerce_level(level)
    stream = stream if stream is not None else sys.stderr
    fmt = format_string or _DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        _attach_handler(logger, _default_level, stream, fmt)

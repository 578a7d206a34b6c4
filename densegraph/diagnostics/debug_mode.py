"""Process-wide debug flag.

With the flag on, every graph mutation re-runs ``Graph.check_invariants``.
The initial value comes from the ``DENSEGRAPH_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_TRUTHY = {"1", "true", "yes", "on"}

_debug_enabled: bool = os.getenv("DENSEGRAPH_DEBUG", "0").lower() in _TRUTHY


def is_debug_enabled() -> bool:
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn invariant checking on mutations on or off."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set the debug flag for the duration of a block, then restore it.

    Example
    -------
    >>> with debug_context(False):
    ...     g = UndirectedGraph.from_matrix(labels, big_matrix)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev

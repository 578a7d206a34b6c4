"""Diagnostics and debugging utilities for densegraph."""

from .core import (
    assert_mask_consistent,
    assert_square,
    assert_symmetric,
    is_square,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_square",
    "assert_square",
    "is_symmetric",
    "assert_symmetric",
    "assert_mask_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

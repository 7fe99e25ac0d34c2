"""
Logging helpers for describing arbitrary values safely.

Tuple components can hold anything, including very large objects. Log lines
and error messages use these helpers so a bad argument is identified by its
type and a bounded preview rather than its full repr.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_LIMIT = 40


def describe_value(value: Any, limit: int = DEFAULT_PREVIEW_LIMIT) -> str:
    """
    Describe a value for log and error output.

    Args:
        value: Any object
        limit: Maximum length of the repr preview

    Returns:
        String of the form ``<type> <preview>``

    Example:
        >>> describe_value(42)
        'int 42'
        >>> describe_value("x" * 100, limit=5)
        "str 'xxx..."
    """
    type_name = type(value).__qualname__
    try:
        preview = repr(value)
    except Exception as e:
        # A broken __repr__ must not mask the error being reported
        logger.debug(f"[describe] repr() failed for {type_name}: {e}")
        return f"{type_name} <unrepresentable>"

    if limit > 0 and len(preview) > limit:
        preview = preview[: limit - 1] + "..."
    return f"{type_name} {preview}"

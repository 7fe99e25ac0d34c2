"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a tuple, helper or option receives an argument it cannot accept.

    The canonical case is building an extended tuple whose ``rest`` is not
    itself a tuple.
    """

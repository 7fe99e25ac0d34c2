"""
Construction helpers for the tuple family.

create() mirrors the fixed set of factory overloads: 1..7 values give the
exactly fitting WriteableTuple and 8 values give an ExtendedTuple whose rest
is a 1-tuple. create_chain() lifts the upper bound by nesting extended tuples.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from writeable_tuple.components.tuples.tuple_comp import MAX_INLINE_ARITY, ExtendedTuple, WriteableTuple
from writeable_tuple.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_CREATE_ARITY = MAX_INLINE_ARITY + 1


def create(*values: Any) -> WriteableTuple:
    """
    Build the smallest tuple holding the given values.

    Args:
        *values: 1 to 8 component values

    Returns:
        WriteableTuple for 1..7 values, ExtendedTuple for 8

    Raises:
        InvalidArgumentError: If called with no values or more than 8
    """
    count = len(values)
    if not 1 <= count <= MAX_CREATE_ARITY:
        raise InvalidArgumentError(
            f"create() takes 1 to {MAX_CREATE_ARITY} values, got {count}; use create_chain() for longer tuples"
        )

    if count <= MAX_INLINE_ARITY:
        logger.debug(f"[create] Built {count}-tuple")
        return WriteableTuple(*values)

    logger.debug(f"[create] Built {count}-tuple with 1-tuple rest")
    return ExtendedTuple(*values[:MAX_INLINE_ARITY], WriteableTuple(values[MAX_INLINE_ARITY]))


def create_chain(values: Iterable[Any]) -> WriteableTuple:
    """
    Build a tuple of any length, nesting extended tuples as needed.

    Every link but the last holds 7 values; the last is a WriteableTuple with
    the remaining 1..7. For up to 8 values the result has the same shape as
    create().

    Args:
        values: Non-empty iterable of component values

    Returns:
        Head of the chain

    Raises:
        InvalidArgumentError: If values is empty
    """
    items = list(values)
    if not items:
        raise InvalidArgumentError("create_chain() needs at least one value")

    # Split off the terminal link, then wrap it from the back
    tail_len = len(items) % MAX_INLINE_ARITY or MAX_INLINE_ARITY
    head_len = len(items) - tail_len

    chain: WriteableTuple = WriteableTuple(*items[head_len:])
    for start in range(head_len - MAX_INLINE_ARITY, -1, -MAX_INLINE_ARITY):
        chain = ExtendedTuple(*items[start : start + MAX_INLINE_ARITY], chain)

    logger.debug(f"[create] Built {len(items)}-tuple chain ({head_len // MAX_INLINE_ARITY} extended links)")
    return chain

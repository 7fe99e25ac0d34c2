"""Tuple family components."""

from .factory_comp import create, create_chain
from .tuple_comp import MAX_INLINE_ARITY, ExtendedTuple, ItemSlot, TupleLike, WriteableTuple

__all__ = [
    "MAX_INLINE_ARITY",
    "ExtendedTuple",
    "ItemSlot",
    "TupleLike",
    "WriteableTuple",
    "create",
    "create_chain",
]

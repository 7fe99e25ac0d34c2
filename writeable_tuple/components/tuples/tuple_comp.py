"""
Mutable fixed-arity tuples.

Two concrete types make up the family:

- WriteableTuple holds 1..7 components, each independently settable.
- ExtendedTuple holds 7 components plus a ``rest`` link that must itself be
  tuple-like, so any length above 7 is a chain ending in a WriteableTuple.

Rendering is split in two steps. ``render()`` writes the opening delimiter and
then delegates to ``render_tail()``, which writes the components and the
closing delimiter. An extended tuple appends its rest's ``render_tail()``
instead of its ``render()``, so a whole chain prints with one pair of
delimiters and a flat list of components.

Instances are not internally synchronized. Callers mutating the same tuple
from several threads must provide their own locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from writeable_tuple.helpers.dto.render_dto import DEFAULT_RENDER_OPTIONS, RenderOptions
from writeable_tuple.helpers.exceptions import InvalidArgumentError
from writeable_tuple.helpers.logging_helper import describe_value

logger = logging.getLogger(__name__)

# Widest tuple stored without a rest link
MAX_INLINE_ARITY = 7

REST_NOT_A_TUPLE = "LastArgumentNotAWriteableTuple"


@runtime_checkable
class TupleLike(Protocol):
    """Capability contract a value must satisfy to be used as a rest link."""

    def size(self) -> int: ...

    def render_tail(self, options: RenderOptions | None = None) -> str: ...


def _is_tuple_like(value: Any) -> bool:
    # Classes carry size/render_tail as plain functions; only instances qualify
    return not isinstance(value, type) and isinstance(value, TupleLike)


def _format_value(value: Any, options: RenderOptions) -> str:
    if value is None:
        return options.none_text
    return str(value)


class ItemSlot:
    """
    Descriptor exposing one positional component as ``itemN``.

    Slots beyond a tuple's arity raise AttributeError, so a 3-tuple has
    item1..item3 and nothing else.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        self.name = f"item{index + 1}"

    def _check(self, instance: WriteableTuple) -> None:
        if self.index >= len(instance._items):
            raise AttributeError(f"{len(instance._items)}-tuple has no attribute {self.name!r}")

    def __get__(self, instance: WriteableTuple | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        self._check(instance)
        return instance._items[self.index]

    def __set__(self, instance: WriteableTuple, value: Any) -> None:
        self._check(instance)
        instance._items[self.index] = value


class WriteableTuple:
    """
    A tuple of 1..7 components whose values can be reassigned.

    The number of components is fixed by the constructor. Components are
    reachable as ``item1`` .. ``itemN``, by index, or by iteration.

    Example:
        >>> t = WriteableTuple(1, "a")
        >>> t.render()
        '(1, a)'
        >>> t.item2 = None
        >>> str(t)
        '(1, )'
    """

    __slots__ = ("_items",)

    item1 = ItemSlot(0)
    item2 = ItemSlot(1)
    item3 = ItemSlot(2)
    item4 = ItemSlot(3)
    item5 = ItemSlot(4)
    item6 = ItemSlot(5)
    item7 = ItemSlot(6)

    def __init__(self, *items: Any) -> None:
        if not 1 <= len(items) <= MAX_INLINE_ARITY:
            raise InvalidArgumentError(
                f"{type(self).__name__} takes 1 to {MAX_INLINE_ARITY} components, got {len(items)}"
            )
        self._items: list[Any] = list(items)

    @property
    def arity(self) -> int:
        """Number of components stored directly on this instance."""
        return len(self._items)

    def items(self) -> tuple[Any, ...]:
        """Snapshot of the directly stored components."""
        return tuple(self._items)

    def size(self) -> int:
        """Logical number of components."""
        return len(self._items)

    def render(self, options: RenderOptions | None = None) -> str:
        """
        Full text form, e.g. ``(1, a)``.

        Args:
            options: Delimiters, separator and none text; defaults to the
                canonical form

        Returns:
            Rendered string
        """
        opts = options or DEFAULT_RENDER_OPTIONS
        return opts.open + self.render_tail(opts)

    def render_tail(self, options: RenderOptions | None = None) -> str:
        """Text form without the opening delimiter, used when this tuple is a rest link."""
        opts = options or DEFAULT_RENDER_OPTIONS
        return self._render_items(opts) + opts.close

    def _render_items(self, opts: RenderOptions) -> str:
        return opts.separator.join(_format_value(item, opts) for item in self._items)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Any:
        return self._items[self._normalize_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._normalize_index(index)] = value

    def _normalize_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"tuple indices must be integers, not {type(index).__name__}")
        size = self.size()
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("tuple index out of range")
        return index

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(item) for item in self._items)})"


class ExtendedTuple(WriteableTuple):
    """
    A tuple of 7 components plus a ``rest`` link holding the remainder.

    ``rest`` must satisfy TupleLike; it is normally a WriteableTuple or
    another ExtendedTuple, giving chains of any length.

    Example:
        >>> t = ExtendedTuple(1, 2, 3, 4, 5, 6, 7, WriteableTuple(8))
        >>> t.size()
        8
        >>> t.render()
        '(1, 2, 3, 4, 5, 6, 7, 8)'
    """

    __slots__ = ("_rest",)

    def __init__(
        self,
        item1: Any,
        item2: Any,
        item3: Any,
        item4: Any,
        item5: Any,
        item6: Any,
        item7: Any,
        rest: TupleLike,
    ) -> None:
        self._check_rest(rest)
        super().__init__(item1, item2, item3, item4, item5, item6, item7)
        self._rest = rest

    @property
    def rest(self) -> TupleLike:
        """Tuple holding the components after the seventh."""
        return self._rest

    @rest.setter
    def rest(self, value: TupleLike) -> None:
        self._check_rest(value)
        self._check_no_cycle(value)
        self._rest = value

    @staticmethod
    def _check_rest(rest: Any) -> None:
        if not _is_tuple_like(rest):
            logger.debug(f"[construct] Rejected rest link: {describe_value(rest)}")
            raise InvalidArgumentError(
                f"{REST_NOT_A_TUPLE}: rest must be a tuple, got {describe_value(rest)}"
            )

    def _check_no_cycle(self, rest: Any) -> None:
        node = rest
        while node is not None:
            if node is self:
                raise InvalidArgumentError("rest chain must not contain the tuple itself")
            node = node.rest if isinstance(node, ExtendedTuple) else None

    def _chain(self) -> tuple[list[ExtendedTuple], Any]:
        """Extended links from this one onwards, and the value ending the chain."""
        links: list[ExtendedTuple] = []
        node: Any = self
        while isinstance(node, ExtendedTuple):
            links.append(node)
            node = node._rest
        return links, node

    def size(self) -> int:
        """Logical number of components across the whole chain."""
        links, end = self._chain()
        inline = MAX_INLINE_ARITY * len(links)
        if not _is_tuple_like(end):
            return inline + 1
        return inline + end.size()

    def render_tail(self, options: RenderOptions | None = None) -> str:
        opts = options or DEFAULT_RENDER_OPTIONS
        links, end = self._chain()
        head = "".join(link._render_items(opts) + opts.separator for link in links)
        if not _is_tuple_like(end):
            return head + _format_value(end, opts) + opts.close
        return head + end.render_tail(opts)

    def __iter__(self) -> Iterator[Any]:
        links, end = self._chain()
        for link in links:
            yield from list(link._items)
        if _is_tuple_like(end):
            yield from end  # type: ignore[misc]
        else:
            yield end

    def __getitem__(self, index: int) -> Any:
        index = self._normalize_index(index)
        links, end = self._chain()
        link_no, offset = divmod(index, MAX_INLINE_ARITY)
        if link_no < len(links):
            return links[link_no]._items[offset]
        if not _is_tuple_like(end):
            return end
        return end[index - MAX_INLINE_ARITY * len(links)]  # type: ignore[index]

    def __setitem__(self, index: int, value: Any) -> None:
        index = self._normalize_index(index)
        links, end = self._chain()
        link_no, offset = divmod(index, MAX_INLINE_ARITY)
        if link_no < len(links):
            links[link_no]._items[offset] = value
            return
        if not _is_tuple_like(end):
            links[-1]._rest = value
            return
        end[index - MAX_INLINE_ARITY * len(links)] = value  # type: ignore[index]

    def __repr__(self) -> str:
        links, end = self._chain()
        heads = [f"{type(link).__name__}({', '.join(repr(item) for item in link._items)}, rest=" for link in links]
        return "".join(heads) + repr(end) + ")" * len(links)

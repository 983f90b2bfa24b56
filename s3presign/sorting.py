# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Lazy merge of two independently sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


_EMPTY = object()


class SortingIterator[T]:
    """Yield the union of two sorted iterables in sorted order.

    At most one element per side is held back between calls to
    ``__next__``, so the inputs are never materialized.  When both sides
    have equal keys, the element from ``a`` is yielded first.

    Once one side is exhausted, the remaining elements of the other side
    are passed through unchanged.

    Args:
        a: First sorted iterable.
        b: Second sorted iterable, sorted under the same order as ``a``.
        key: Optional function extracting the comparison key.
    """

    __slots__ = ("_a", "_b", "_a_buffer", "_b_buffer", "_key")

    def __init__(
        self,
        a: Iterable[T],
        b: Iterable[T],
        key: Callable[[T], Any] | None = None,
    ) -> None:
        self._a = iter(a)
        self._b = iter(b)
        self._a_buffer: Any = _EMPTY
        self._b_buffer: Any = _EMPTY
        self._key = key

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        a_next = self._a_buffer
        if a_next is _EMPTY:
            a_next = next(self._a, _EMPTY)
        b_next = self._b_buffer
        if b_next is _EMPTY:
            b_next = next(self._b, _EMPTY)
        self._a_buffer = _EMPTY
        self._b_buffer = _EMPTY

        if a_next is _EMPTY and b_next is _EMPTY:
            raise StopIteration
        if b_next is _EMPTY:
            return a_next
        if a_next is _EMPTY:
            return b_next

        if self._key is None:
            b_first = b_next < a_next
        else:
            b_first = self._key(b_next) < self._key(a_next)

        if b_first:
            self._a_buffer = a_next
            return b_next
        self._b_buffer = b_next
        return a_next

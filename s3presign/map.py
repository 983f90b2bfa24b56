# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Sorted key/value container for query parameters and signed headers.

Keys are kept unique and in ascending order, so iterating a ``ParamMap``
always yields pairs in the order the canonical request needs.  Inserting
an existing key appends the new value to the old one, joined by ``", "``
(the way repeated HTTP header fields are combined).
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from operator import itemgetter


_key = itemgetter(0)


class ParamMap:
    """Ordered parameter map with merge-on-collision inserts."""

    __slots__ = ("_inner",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._inner: list[tuple[str, str]] = []
        for key, value in pairs:
            self.insert(key, value)

    def _index(self, key: str) -> int:
        return bisect.bisect_left(self._inner, key, key=_key)

    def insert(self, key: str, value: str) -> None:
        """Insert a pair, merging with an existing value for the same key.

        Args:
            key: Parameter or header name.
            value: Value to insert.  If ``key`` is already present the
                stored value becomes ``"<old>, <value>"``.
        """
        i = self._index(key)
        if i < len(self._inner) and self._inner[i][0] == key:
            old = self._inner[i][1]
            self._inner[i] = (key, f"{old}, {value}")
        else:
            self._inner.insert(i, (key, value))

    def get(self, key: str) -> str | None:
        """Return the value stored for ``key``, or None if absent."""
        i = self._index(key)
        if i < len(self._inner) and self._inner[i][0] == key:
            return self._inner[i][1]
        return None

    def remove(self, key: str) -> tuple[str, str] | None:
        """Remove ``key`` and return its pair, or None if absent."""
        i = self._index(key)
        if i < len(self._inner) and self._inner[i][0] == key:
            return self._inner.pop(i)
        return None

    def iter(self) -> Iterator[tuple[str, str]]:
        """Iterate pairs in ascending key order."""
        return iter(self._inner)

    def copy(self) -> ParamMap:
        new = ParamMap()
        new._inner = list(self._inner)
        return new

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __bool__(self) -> bool:
        return bool(self._inner)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamMap):
            return NotImplemented
        return self._inner == other._inner

    def __repr__(self) -> str:
        return repr(dict(self._inner))

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Scratch buffers for secret material that are zeroed after use."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


def wipe(buffer: bytearray) -> None:
    """Overwrite a buffer with zeros in place."""
    buffer[:] = bytes(len(buffer))


@contextmanager
def scrubbed(*parts: bytes | bytearray) -> Iterator[bytearray]:
    """Concatenate ``parts`` into a buffer that is zeroed on exit.

    The buffer is wiped on every exit path, including exceptions.
    """
    buffer = bytearray()
    try:
        for part in parts:
            buffer += part
        yield buffer
    finally:
        wipe(buffer)

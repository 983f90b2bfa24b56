# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Percent-encoding profiles used for S3 canonicalization.

S3 canonicalizes query strings and paths differently:

- Query names and values (and anything else that is not a path) escape
  every reserved and unsafe character, including ``/``.
- Paths escape the same set except ``/``, which separates segments.

Everything is encoded byte-wise over UTF-8 as ``%XX`` with uppercase hex.
Non-ASCII bytes and control characters are always encoded.  Input is never
rejected: strings that are not valid Unicode (lone surrogates) are encoded
with ``surrogatepass``.
"""

from __future__ import annotations


# RFC 3986 gen-delims and sub-delims
_URL_RESERVED = b":?#[]@!$&'()*+,;="
# Characters that are unsafe anywhere in a URL
_URL_UNSAFE = b'" <>%{}|\\^`'


def _build_table(escaped: bytes) -> tuple[str, ...]:
    """Build a byte -> output lookup table.

    Printable ASCII (0x21-0x7E) passes through unless listed in
    ``escaped``; every other byte is percent-encoded.
    """
    table = []
    for byte in range(256):
        if 0x21 <= byte <= 0x7E and byte not in escaped:
            table.append(chr(byte))
        else:
            table.append(f"%{byte:02X}")
    return tuple(table)


_QUERY_TABLE = _build_table(_URL_RESERVED + _URL_UNSAFE + b"/")
_PATH_TABLE = _build_table(_URL_RESERVED + _URL_UNSAFE)


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogatepass")


def percent_encode(value: str | bytes) -> str:
    """Encode a query name/value or header value (``/`` is escaped).

    Args:
        value: Raw text or bytes.

    Returns:
        Percent-encoded string.
    """
    return "".join([_QUERY_TABLE[b] for b in _to_bytes(value)])


def percent_encode_path(value: str | bytes) -> str:
    """Encode a URL path, leaving ``/`` separators literal.

    Args:
        value: Raw path or object key.

    Returns:
        Percent-encoded path.
    """
    return "".join([_PATH_TABLE[b] for b in _to_bytes(value)])

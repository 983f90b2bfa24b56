# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Canonical request construction for presigned S3 URLs.

The canonical request is the exact text whose SHA-256 digest gets signed::

    <METHOD>
    <canonical path>
    <canonical query string>
    <canonical headers, one "name:value\\n" line each>
    <signed header names joined by ";">
    UNSIGNED-PAYLOAD

Query pairs and headers must already be sorted by name; this module does
not reorder anything.
"""

from __future__ import annotations

import urllib.parse
from collections.abc import Iterable

from s3presign.method import Method
from s3presign.signing.encoding import percent_encode, percent_encode_path


UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"


def canonical_path(url: str) -> str:
    """Return the canonical path of ``url``.

    The path is percent-decoded and then re-encoded with the path-safe
    profile, so already-encoded and raw paths canonicalize identically.
    An empty path canonicalizes to ``/``.
    """
    path = urllib.parse.urlsplit(url).path
    if not path:
        return "/"
    return percent_encode_path(urllib.parse.unquote_to_bytes(path))


def canonical_query_string(query_string: Iterable[tuple[str, str]]) -> str:
    """Join sorted query pairs as ``k1=v1&k2=v2``, encoding each part."""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(value)}"
        for key, value in query_string
    )


def canonical_headers(headers: Iterable[tuple[str, str]]) -> str:
    """Render sorted headers as ``name:value\\n`` lines (values trimmed)."""
    return "".join(f"{name}:{value.strip()}\n" for name, value in headers)


def canonical_request(
    method: Method,
    url: str,
    query_string: Iterable[tuple[str, str]],
    headers: Iterable[tuple[str, str]],
    signed_headers: Iterable[str],
) -> str:
    """Build the canonical request string.

    Args:
        method: HTTP method.
        url: Request URL; only its path is used.
        query_string: Sorted raw query pairs (encoded here).
        headers: Sorted ``(lowercase name, value)`` header pairs.
        signed_headers: Sorted lowercase names of the signed headers.

    Returns:
        Canonical request string.
    """
    return "\n".join(
        [
            method.value,
            canonical_path(url),
            canonical_query_string(query_string),
            canonical_headers(headers),
            ";".join(signed_headers),
            UNSIGNED_PAYLOAD,
        ]
    )

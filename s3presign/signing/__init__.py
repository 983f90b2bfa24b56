# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Presigned URL generation (SigV4 query-string authentication).

``sign`` is the single entry point used by the action builders.  It is a
pure function of its inputs: no clock reads, no I/O, no caching.  The
caller supplies the signing instant so that the ``X-Amz-Date`` parameter
and the credential scope are always derived from the same moment.
"""

from __future__ import annotations

import hashlib
import logging
import urllib.parse
from collections.abc import Iterable
from datetime import datetime
from operator import itemgetter
from typing import TYPE_CHECKING

from s3presign.map import ParamMap
from s3presign.method import Method
from s3presign.signing.canonical_request import (
    canonical_request as build_canonical_request,
)
from s3presign.signing.signature import signature as compute_signature
from s3presign.signing.string_to_sign import (
    ALGORITHM,
    scope,
    string_to_sign as build_string_to_sign,
)
from s3presign.sorting import SortingIterator
from s3presign.timestamps import iso8601


if TYPE_CHECKING:
    from s3presign.credentials.credentials import Credentials


logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}
_by_name = itemgetter(0)


def _encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    return urllib.parse.urlencode(
        list(pairs), quote_via=urllib.parse.quote, errors="surrogatepass"
    )


def host_header(url: str) -> str:
    """Return the ``host`` header value for ``url``.

    The port is only included when it differs from the scheme default.
    IPv6 literals keep their brackets.
    """
    parts = urllib.parse.urlsplit(url)
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
        return f"{host}:{port}"
    return host


def add_query_params(url: str, query: Iterable[tuple[str, str]]) -> str:
    """Append ``query`` to the URL's query string without signing.

    Used for anonymous requests.  Existing query parameters are kept and
    the URL is returned unchanged when ``query`` is empty.

    Args:
        url: Base URL.
        query: Query pairs, appended in the given order.

    Returns:
        URL with the parameters appended.
    """
    extra = _encode_query(query)
    if not extra:
        return url
    parts = urllib.parse.urlsplit(url)
    joined = f"{parts.query}&{extra}" if parts.query else extra
    return urllib.parse.urlunsplit(parts._replace(query=joined))


def sign(
    date: datetime,
    method: Method,
    url: str,
    credentials: Credentials | None,
    region: str,
    expires_seconds: int,
    query_string: Iterable[tuple[str, str]] = (),
    headers: Iterable[tuple[str, str]] = (),
) -> str:
    """Presign a request.

    Any query string already present on ``url`` is replaced by the
    merged, sorted set of caller and ``X-Amz-*`` parameters, and
    ``X-Amz-Signature`` is appended last.

    Every header passed in ``headers`` becomes a signed header and must be
    sent unmodified with the eventual HTTP request.  The ``host`` header is
    always derived from ``url``; a caller-supplied ``host`` is ignored.

    Args:
        date: Signing instant (naive values are taken as UTC).
        method: HTTP method.
        url: Fully resolved object or bucket URL.
        credentials: Credentials snapshot, or None for an anonymous URL.
        region: Bucket region.
        expires_seconds: Validity window in seconds.
        query_string: Extra query pairs, sorted by name.
        headers: Extra headers to sign, sorted by lower-cased name.

    Returns:
        The presigned URL.
    """
    if credentials is None:
        return add_query_params(url, query_string)

    extra_headers = ParamMap((name.lower(), value) for name, value in headers)
    if extra_headers.remove("host") is not None:
        logger.debug("Ignoring caller host header, using the URL host")
    all_headers = list(
        SortingIterator(
            [("host", host_header(url))], extra_headers, key=_by_name
        )
    )
    signed_headers = [name for name, _ in all_headers]
    signed_headers_str = ";".join(signed_headers)

    credential_scope = scope(date, region)
    mandatory = [
        ("X-Amz-Algorithm", ALGORITHM),
        ("X-Amz-Credential", f"{credentials.key}/{credential_scope}"),
        ("X-Amz-Date", iso8601(date)),
        ("X-Amz-Expires", str(expires_seconds)),
    ]
    if credentials.token is not None:
        mandatory.append(("X-Amz-Security-Token", credentials.token))
    mandatory.append(("X-Amz-SignedHeaders", signed_headers_str))

    all_query = list(SortingIterator(mandatory, query_string, key=_by_name))
    parts = urllib.parse.urlsplit(url)
    signed_url = urllib.parse.urlunsplit(
        parts._replace(query=_encode_query(all_query))
    )

    request = build_canonical_request(
        method, signed_url, all_query, all_headers, signed_headers
    )
    logger.debug(
        "Signing %s request for access key %s, scope %s, headers %s, "
        "canonical request sha256 %s",
        method,
        credentials.key,
        credential_scope,
        signed_headers_str,
        hashlib.sha256(request.encode("utf-8", "surrogatepass")).hexdigest(),
    )
    to_sign = build_string_to_sign(date, region, request)
    with credentials.exposed_secret() as secret:
        sig = compute_signature(date, secret, region, to_sign)

    return f"{signed_url}&X-Amz-Signature={sig}"


__all__ = ["add_query_params", "host_header", "sign"]

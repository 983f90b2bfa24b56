# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""SigV4 string-to-sign assembly."""

from __future__ import annotations

import hashlib
from datetime import datetime

from s3presign.timestamps import iso8601, yyyymmdd


ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE = "s3"
REQUEST_TYPE = "aws4_request"


def scope(date: datetime, region: str) -> str:
    """Credential scope: ``YYYYMMDD/<region>/s3/aws4_request``."""
    return f"{yyyymmdd(date)}/{region}/{SERVICE}/{REQUEST_TYPE}"


def string_to_sign(date: datetime, region: str, canonical_request: str) -> str:
    """Build the string to sign for a canonical request.

    The timestamp and the scope date are both derived from ``date``.

    Args:
        date: Signing instant.
        region: Bucket region.
        canonical_request: Canonical request string.

    Returns:
        String to sign.
    """
    return "\n".join(
        [
            ALGORITHM,
            iso8601(date),
            scope(date, region),
            hashlib.sha256(
                canonical_request.encode("utf-8", "surrogatepass")
            ).hexdigest(),
        ]
    )

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""SigV4 signing key derivation and signature computation."""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime

from s3presign.secret import scrubbed
from s3presign.signing.string_to_sign import REQUEST_TYPE, SERVICE
from s3presign.timestamps import yyyymmdd


def _hmac_sha256(key: bytes | bytearray, msg: str | bytes) -> bytes:
    """HMAC-SHA256 helper."""
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    return hmac.new(key, msg, hashlib.sha256).digest()


def derive_signing_key(
    secret: bytes | bytearray, date: datetime, region: str
) -> bytes:
    """Derive the SigV4 signing key for S3.

    Four chained HMAC-SHA256 steps over the scope::

        kDate    = HMAC("AWS4" + secret, YYYYMMDD)
        kRegion  = HMAC(kDate, region)
        kService = HMAC(kRegion, "s3")
        kSigning = HMAC(kService, "aws4_request")

    Args:
        secret: UTF-8 encoded secret access key.
        date: Signing instant (only the UTC date is used).
        region: Bucket region.

    Returns:
        Derived 32-byte signing key.
    """
    with scrubbed(b"AWS4", secret) as raw_date:
        date_key = _hmac_sha256(raw_date, yyyymmdd(date))
    date_region_key = _hmac_sha256(date_key, region)
    date_region_service_key = _hmac_sha256(date_region_key, SERVICE)
    return _hmac_sha256(date_region_service_key, REQUEST_TYPE)


def signature(
    date: datetime,
    secret: str | bytes | bytearray,
    region: str,
    string_to_sign: str,
) -> str:
    """Compute the hex-encoded SigV4 signature of ``string_to_sign``.

    Args:
        date: Signing instant.
        secret: Secret access key.
        region: Bucket region.
        string_to_sign: The string to sign.

    Returns:
        64 lowercase hex characters.
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    signing_key = derive_signing_key(secret, date, region)
    return hmac.new(
        signing_key, string_to_sign.encode("utf-8"), hashlib.sha256
    ).hexdigest()

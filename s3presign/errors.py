# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Exception hierarchy for s3presign.

Signing itself never raises: every failure is surfaced either when a
``Bucket`` is constructed or when a response document is decoded.
"""


class S3PresignError(Exception):
    """Base exception for s3presign errors."""


class BucketError(S3PresignError):
    """Base exception for invalid bucket endpoints."""


class UnsupportedSchemeError(BucketError):
    """The endpoint URL scheme is neither ``http`` nor ``https``."""


class MissingHostError(BucketError):
    """The endpoint URL has no host."""


class ResponseParseError(S3PresignError):
    """An S3 response body could not be decoded."""


class InvalidEndpointError(BucketError):
    """The endpoint URL is malformed, e.g. its port is not a number."""

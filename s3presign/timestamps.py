# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Timestamp formatting for SigV4 scopes and ``X-Amz-Date``."""

from datetime import UTC, datetime


ISO8601 = "%Y%m%dT%H%M%SZ"
YYYYMMDD = "%Y%m%d"


def as_utc(date: datetime) -> datetime:
    """Normalize a datetime to UTC, second precision.

    Naive datetimes are taken to already be in UTC.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    return date.astimezone(UTC).replace(microsecond=0)


def iso8601(date: datetime) -> str:
    """Format as basic ISO-8601 (``YYYYMMDDTHHMMSSZ``)."""
    return as_utc(date).strftime(ISO8601)


def yyyymmdd(date: datetime) -> str:
    """Format as the scope date (``YYYYMMDD``)."""
    return as_utc(date).strftime(YYYYMMDD)

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Common machinery for presignable S3 actions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from operator import itemgetter
from typing import TYPE_CHECKING, ClassVar

from s3presign.credentials import (
    Credentials,
    RotatingCredentials,
    resolve_credentials,
)
from s3presign.map import ParamMap
from s3presign.method import Method
from s3presign.signing import sign
from s3presign.sorting import SortingIterator


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


type CredentialsSource = Credentials | RotatingCredentials | None

_by_name = itemgetter(0)


class S3Action:
    """A request against a bucket that can be turned into a presigned URL.

    ``query`` and ``headers`` may be modified before signing.  Every
    header added to ``headers`` is signed and must be sent with exactly
    the same value in the eventual HTTP request.

    Subclasses set ``METHOD`` and override ``url()`` and/or
    ``fixed_query()``.
    """

    METHOD: ClassVar[Method]

    def __init__(self, bucket: Bucket, credentials: CredentialsSource) -> None:
        self.bucket = bucket
        self.credentials = credentials
        self.query = ParamMap()
        self.headers = ParamMap()

    def url(self) -> str:
        """Unsigned URL the action targets."""
        return self.bucket.base_url

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        """Action-specific query parameters, sorted by name."""
        return ()

    def sign(self, expires_in: timedelta) -> str:
        """Presign the action, valid for ``expires_in`` from now."""
        return self.sign_with_time(expires_in, datetime.now(UTC))

    def sign_with_time(self, expires_in: timedelta, time: datetime) -> str:
        """Presign the action as of ``time``.

        Without credentials the URL carries only the query parameters.

        Args:
            expires_in: Validity window (whole seconds are used).
            time: Signing instant.

        Returns:
            Presigned URL.
        """
        query = SortingIterator(self.fixed_query(), self.query, key=_by_name)
        return sign(
            time,
            self.METHOD,
            self.url(),
            resolve_credentials(self.credentials),
            self.bucket.region,
            int(expires_in.total_seconds()),
            query,
            self.headers,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bucket={self.bucket.name!r}, "
            f"query={self.query!r}, headers={self.headers!r})"
        )


class ObjectAction(S3Action):
    """An action on a single object of the bucket."""

    def __init__(
        self, bucket: Bucket, credentials: CredentialsSource, key: str
    ) -> None:
        super().__init__(bucket, credentials)
        self.key = key

    def url(self) -> str:
        return self.bucket.object_url(self.key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bucket={self.bucket.name!r}, "
            f"key={self.key!r}, query={self.query!r}, "
            f"headers={self.headers!r})"
        )

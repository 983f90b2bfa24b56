# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Single-object actions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from s3presign.actions.base import CredentialsSource, ObjectAction
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


class HeadObject(ObjectAction):
    """Retrieve an object's metadata."""

    METHOD = Method.HEAD


class GetObject(ObjectAction):
    """Download an object."""

    METHOD = Method.GET


class PutObject(ObjectAction):
    """Upload an object in a single request."""

    METHOD = Method.PUT


class DeleteObject(ObjectAction):
    """Delete an object."""

    METHOD = Method.DELETE


class CopyObject(ObjectAction):
    """Copy ``src_key`` to ``dst_key`` server side.

    Only objects up to 5 GB can be copied this way, and a 200 response
    does not guarantee that the copy succeeded.

    Args:
        bucket: Destination bucket.
        credentials: Credentials, or None for an anonymous URL.
        src_key: Source object key.
        dst_key: Destination object key.
        prepend_bucket: Prefix the copy source with ``<bucket name>/``.
            Disable when ``src_key`` already names its bucket.
    """

    METHOD = Method.PUT

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        src_key: str,
        dst_key: str,
        prepend_bucket: bool = True,
    ) -> None:
        super().__init__(bucket, credentials, dst_key)
        self.src_key = src_key
        self.prepend_bucket = prepend_bucket

    def copy_source(self) -> str:
        if self.prepend_bucket:
            return f"{self.bucket.name}/{self.src_key}"
        return self.src_key

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("x-amz-copy-source", self.copy_source())]

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Abort a multipart upload, discarding its parts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from s3presign.actions.base import CredentialsSource, ObjectAction
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


class AbortMultipartUpload(ObjectAction):
    METHOD = Method.DELETE

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        key: str,
        upload_id: str,
    ) -> None:
        super().__init__(bucket, credentials, key)
        self.upload_id = upload_id

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("uploadId", self.upload_id)]

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Upload a single part of a multipart upload."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from s3presign.actions.base import CredentialsSource, ObjectAction
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


class UploadPart(ObjectAction):
    """Upload part ``part_number`` (1-10000) of upload ``upload_id``.

    The ``ETag`` response header of each part must be kept for
    ``CompleteMultipartUpload``.
    """

    METHOD = Method.PUT

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        key: str,
        part_number: int,
        upload_id: str,
    ) -> None:
        super().__init__(bucket, credentials, key)
        self.part_number = part_number
        self.upload_id = upload_id

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [
            ("partNumber", str(self.part_number)),
            ("uploadId", self.upload_id),
        ]

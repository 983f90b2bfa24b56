# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Finish a multipart upload by listing its parts' ETags."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import TYPE_CHECKING

from s3presign.actions.base import CredentialsSource, ObjectAction
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


class CompleteMultipartUpload(ObjectAction):
    """Assemble the uploaded parts into the final object.

    Args:
        bucket: Bucket of the upload.
        credentials: Credentials, or None for an anonymous URL.
        key: Object key.
        upload_id: Upload ID from ``CreateMultipartUpload``.
        etags: ETags of the parts, in part-number order starting at 1.
    """

    METHOD = Method.POST

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        key: str,
        upload_id: str,
        etags: Iterable[str],
    ) -> None:
        super().__init__(bucket, credentials, key)
        self.upload_id = upload_id
        self.etags = list(etags)

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("uploadId", self.upload_id)]

    def body(self) -> str:
        """XML request body listing every part."""
        root = ET.Element("CompleteMultipartUpload")
        for number, etag in enumerate(self.etags, start=1):
            part = ET.SubElement(root, "Part")
            ET.SubElement(part, "ETag").text = etag
            ET.SubElement(part, "PartNumber").text = str(number)
        return ET.tostring(root, encoding="unicode")

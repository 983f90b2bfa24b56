# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Start a multipart upload and decode the upload ID S3 assigns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from s3presign.actions import _xml
from s3presign.actions.base import ObjectAction
from s3presign.method import Method


@dataclass(frozen=True)
class CreateMultipartUploadResponse:
    upload_id: str


class CreateMultipartUpload(ObjectAction):
    """Initiate a multipart upload (``POST /<key>?uploads``).

    Parts can then be uploaded independently, in parallel, and resumed
    without starting over.
    """

    METHOD = Method.POST

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("uploads", "1")]

    @staticmethod
    def parse_response(
        document: str | bytes,
    ) -> CreateMultipartUploadResponse:
        """Decode an ``InitiateMultipartUploadResult`` document.

        Raises:
            ResponseParseError: If the document has no ``UploadId``.
        """
        root = _xml.parse(document)
        return CreateMultipartUploadResponse(
            upload_id=_xml.required_text(root, "UploadId")
        )

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Multipart upload lifecycle actions."""

from s3presign.actions.multipart_upload.abort import AbortMultipartUpload
from s3presign.actions.multipart_upload.complete import (
    CompleteMultipartUpload,
)
from s3presign.actions.multipart_upload.create import (
    CreateMultipartUpload,
    CreateMultipartUploadResponse,
)
from s3presign.actions.multipart_upload.list_parts import (
    ListParts,
    ListPartsResponse,
    PartsContent,
)
from s3presign.actions.multipart_upload.upload import UploadPart


__all__ = [
    "AbortMultipartUpload",
    "CompleteMultipartUpload",
    "CreateMultipartUpload",
    "CreateMultipartUploadResponse",
    "ListParts",
    "ListPartsResponse",
    "PartsContent",
    "UploadPart",
]

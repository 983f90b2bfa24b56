# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Presignable S3 actions and their request/response helpers."""

from s3presign.actions.base import CredentialsSource, ObjectAction, S3Action
from s3presign.actions.bucket_actions import (
    CreateBucket,
    DeleteBucket,
    GetBucketPolicy,
    GetBucketPolicyResponse,
    HeadBucket,
)
from s3presign.actions.delete_objects import (
    DeletedObject,
    DeleteObjects,
    DeleteObjectsResponse,
    ErrorObject,
    ObjectIdentifier,
)
from s3presign.actions.list_objects_v2 import (
    CommonPrefixes,
    ListObjectsContent,
    ListObjectsOwner,
    ListObjectsV2,
    ListObjectsV2Response,
)
from s3presign.actions.multipart_upload import (
    AbortMultipartUpload,
    CompleteMultipartUpload,
    CreateMultipartUpload,
    CreateMultipartUploadResponse,
    ListParts,
    ListPartsResponse,
    PartsContent,
    UploadPart,
)
from s3presign.actions.object_actions import (
    CopyObject,
    DeleteObject,
    GetObject,
    HeadObject,
    PutObject,
)


__all__ = [
    "AbortMultipartUpload",
    "CommonPrefixes",
    "CompleteMultipartUpload",
    "CopyObject",
    "CreateBucket",
    "CreateMultipartUpload",
    "CreateMultipartUploadResponse",
    "CredentialsSource",
    "DeleteBucket",
    "DeleteObject",
    "DeleteObjects",
    "DeleteObjectsResponse",
    "DeletedObject",
    "ErrorObject",
    "GetBucketPolicy",
    "GetBucketPolicyResponse",
    "GetObject",
    "HeadBucket",
    "HeadObject",
    "ListObjectsContent",
    "ListObjectsOwner",
    "ListObjectsV2",
    "ListObjectsV2Response",
    "ListParts",
    "ListPartsResponse",
    "ObjectAction",
    "ObjectIdentifier",
    "PartsContent",
    "PutObject",
    "S3Action",
    "UploadPart",
]

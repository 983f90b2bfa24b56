# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Sans-I/O presigned URL generation for S3-compatible object storage.

Example:
    bucket = Bucket(
        "https://s3.eu-west-1.amazonaws.com",
        UrlStyle.VIRTUAL_HOST,
        "my-bucket",
        "eu-west-1",
    )
    credentials = Credentials.from_env()
    url = bucket.get_object(credentials, "cat.jpg").sign(
        timedelta(hours=1)
    )

The returned URL can be fetched with any HTTP client.
"""

from s3presign.bucket import Bucket, UrlStyle
from s3presign.credentials import (
    Credentials,
    Ec2SecurityCredentialsMetadataResponse,
    RotatingCredentials,
)
from s3presign.errors import (
    BucketError,
    MissingHostError,
    ResponseParseError,
    S3PresignError,
    UnsupportedSchemeError,
)
from s3presign.map import ParamMap
from s3presign.method import Method


__all__ = [
    "Bucket",
    "BucketError",
    "Credentials",
    "Ec2SecurityCredentialsMetadataResponse",
    "Method",
    "MissingHostError",
    "ParamMap",
    "ResponseParseError",
    "RotatingCredentials",
    "S3PresignError",
    "UnsupportedSchemeError",
    "UrlStyle",
]

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""S3 credentials: static, rotating, and instance-metadata sourced."""

from s3presign.credentials.credentials import Credentials
from s3presign.credentials.metadata import (
    Ec2SecurityCredentialsMetadataResponse,
)
from s3presign.credentials.rotating import (
    RotatingCredentials,
    resolve_credentials,
)


__all__ = [
    "Credentials",
    "Ec2SecurityCredentialsMetadataResponse",
    "RotatingCredentials",
    "resolve_credentials",
]

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Bucket URL resolution and action factories.

A ``Bucket`` turns an S3-compatible endpoint plus a bucket name into the
base URL every action signs against.  Endpoint validation happens here,
once, so that signing never has to deal with a URL it cannot sign.
"""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Iterable
from enum import Enum

from s3presign.actions import (
    AbortMultipartUpload,
    CompleteMultipartUpload,
    CopyObject,
    CreateBucket,
    CreateMultipartUpload,
    DeleteBucket,
    DeleteObject,
    DeleteObjects,
    GetBucketPolicy,
    GetObject,
    HeadBucket,
    HeadObject,
    ListObjectsV2,
    ListParts,
    ObjectIdentifier,
    PutObject,
    UploadPart,
)
from s3presign.actions.base import CredentialsSource
from s3presign.errors import (
    InvalidEndpointError,
    MissingHostError,
    UnsupportedSchemeError,
)
from s3presign.signing.encoding import percent_encode_path


logger = logging.getLogger(__name__)

_SUPPORTED_SCHEMES = ("http", "https")


class UrlStyle(Enum):
    """How the bucket name is placed in request URLs."""

    #: ``https://s3.<region>.amazonaws.com/<bucket>/<key>``
    PATH = "path"
    #: ``https://<bucket>.s3.<region>.amazonaws.com/<key>``
    VIRTUAL_HOST = "virtual-host"


def _base_url(
    parts: urllib.parse.SplitResult, name: str, url_style: UrlStyle
) -> str:
    path = parts.path if parts.path.endswith("/") else f"{parts.path}/"
    if url_style is UrlStyle.PATH:
        return urllib.parse.urlunsplit(
            parts._replace(path=f"{path}{name}/", query="", fragment="")
        )

    netloc = f"{name}.{parts.hostname}"
    if parts.port is not None:
        netloc = f"{netloc}:{parts.port}"
    return urllib.parse.urlunsplit(
        parts._replace(netloc=netloc, path=path, query="", fragment="")
    )


class Bucket:
    """An S3 bucket reachable through a given endpoint.

    Args:
        endpoint: Endpoint URL, e.g. ``https://s3.eu-west-1.amazonaws.com``.
        url_style: Path-style or virtual-hosted-style addressing.
        name: Bucket name.
        region: Bucket region, used in the signing scope.

    Raises:
        MissingHostError: If ``endpoint`` has no host.
        UnsupportedSchemeError: If ``endpoint`` is not http or https.
        InvalidEndpointError: If ``endpoint`` cannot be parsed or its port
            is invalid.
    """

    __slots__ = ("_base_url", "_name", "_region")

    def __init__(
        self, endpoint: str, url_style: UrlStyle, name: str, region: str
    ) -> None:
        try:
            parts = urllib.parse.urlsplit(endpoint)
            # urlsplit only validates the port when it is read
            parts.port  # noqa: B018
        except ValueError as e:
            raise InvalidEndpointError(
                f"Endpoint {endpoint!r} is malformed: {e}"
            ) from e
        if not parts.hostname:
            raise MissingHostError(f"Endpoint {endpoint!r} has no host")
        if parts.scheme not in _SUPPORTED_SCHEMES:
            raise UnsupportedSchemeError(
                f"Endpoint {endpoint!r} must use http or https, "
                f"got {parts.scheme!r}"
            )

        self._base_url = _base_url(parts, name, url_style)
        self._name = name
        self._region = region
        logger.debug("Bucket %s at %s (%s)", name, self._base_url, region)

    @property
    def base_url(self) -> str:
        """URL of the bucket itself (ends with ``/``)."""
        return self._base_url

    @property
    def name(self) -> str:
        return self._name

    @property
    def region(self) -> str:
        return self._region

    def object_url(self, key: str) -> str:
        """Return the unsigned URL of object ``key`` in this bucket.

        Each path segment of ``key`` is percent-encoded; ``/`` stays literal.
        The key is appended verbatim, so ``..`` segments and leading slashes
        are part of the key rather than URL navigation.
        """
        return f"{self._base_url}{percent_encode_path(key)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bucket):
            return NotImplemented
        return (self._base_url, self._name, self._region) == (
            other._base_url,
            other._name,
            other._region,
        )

    def __hash__(self) -> int:
        return hash((self._base_url, self._name, self._region))

    def __repr__(self) -> str:
        return (
            f"Bucket(base_url={self._base_url!r}, name={self._name!r}, "
            f"region={self._region!r})"
        )

    # ------------------------------------------------------------------
    # Bucket level actions
    # ------------------------------------------------------------------

    def create_bucket(self, credentials: CredentialsSource) -> CreateBucket:
        return CreateBucket(self, credentials)

    def delete_bucket(self, credentials: CredentialsSource) -> DeleteBucket:
        return DeleteBucket(self, credentials)

    def head_bucket(self, credentials: CredentialsSource) -> HeadBucket:
        return HeadBucket(self, credentials)

    def get_bucket_policy(
        self, credentials: CredentialsSource
    ) -> GetBucketPolicy:
        return GetBucketPolicy(self, credentials)

    def list_objects_v2(self, credentials: CredentialsSource) -> ListObjectsV2:
        return ListObjectsV2(self, credentials)

    def delete_objects(
        self,
        credentials: CredentialsSource,
        objects: Iterable[ObjectIdentifier],
    ) -> DeleteObjects:
        return DeleteObjects(self, credentials, objects)

    # ------------------------------------------------------------------
    # Object actions
    # ------------------------------------------------------------------

    def head_object(
        self, credentials: CredentialsSource, key: str
    ) -> HeadObject:
        return HeadObject(self, credentials, key)

    def get_object(self, credentials: CredentialsSource, key: str) -> GetObject:
        return GetObject(self, credentials, key)

    def put_object(self, credentials: CredentialsSource, key: str) -> PutObject:
        return PutObject(self, credentials, key)

    def delete_object(
        self, credentials: CredentialsSource, key: str
    ) -> DeleteObject:
        return DeleteObject(self, credentials, key)

    def copy_object(
        self,
        credentials: CredentialsSource,
        src_key: str,
        dst_key: str,
        prepend_bucket: bool = True,
    ) -> CopyObject:
        return CopyObject(self, credentials, src_key, dst_key, prepend_bucket)

    # ------------------------------------------------------------------
    # Multipart upload
    # ------------------------------------------------------------------

    def create_multipart_upload(
        self, credentials: CredentialsSource, key: str
    ) -> CreateMultipartUpload:
        return CreateMultipartUpload(self, credentials, key)

    def upload_part(
        self,
        credentials: CredentialsSource,
        key: str,
        part_number: int,
        upload_id: str,
    ) -> UploadPart:
        return UploadPart(self, credentials, key, part_number, upload_id)

    def complete_multipart_upload(
        self,
        credentials: CredentialsSource,
        key: str,
        upload_id: str,
        etags: Iterable[str],
    ) -> CompleteMultipartUpload:
        return CompleteMultipartUpload(
            self, credentials, key, upload_id, etags
        )

    def abort_multipart_upload(
        self, credentials: CredentialsSource, key: str, upload_id: str
    ) -> AbortMultipartUpload:
        return AbortMultipartUpload(self, credentials, key, upload_id)

    def list_parts(
        self, credentials: CredentialsSource, key: str, upload_id: str
    ) -> ListParts:
        return ListParts(self, credentials, key, upload_id)

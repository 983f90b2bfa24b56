# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""ListObjectsV2: paginated listing of the keys in a bucket.

When ``next_continuation_token`` is set in a response the listing was
truncated; sign a new ``ListObjectsV2`` with ``with_continuation_token``
to fetch the next page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from s3presign.actions import _xml
from s3presign.actions.base import CredentialsSource, S3Action
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


@dataclass(frozen=True)
class ListObjectsOwner:
    id: str
    display_name: str


@dataclass(frozen=True)
class ListObjectsContent:
    etag: str
    key: str
    last_modified: str
    owner: ListObjectsOwner | None
    size: int
    storage_class: str | None


@dataclass(frozen=True)
class CommonPrefixes:
    prefix: str


@dataclass(frozen=True)
class ListObjectsV2Response:
    contents: tuple[ListObjectsContent, ...]
    max_keys: int | None
    common_prefixes: tuple[CommonPrefixes, ...]
    next_continuation_token: str | None
    start_after: str | None


class ListObjectsV2(S3Action):
    """List the objects in a bucket (``GET /?list-type=2``)."""

    METHOD = Method.GET

    def __init__(self, bucket: Bucket, credentials: CredentialsSource) -> None:
        super().__init__(bucket, credentials)
        self.query.insert("list-type", "2")
        self.query.insert("encoding-type", "url")

    def with_prefix(self, prefix: str) -> None:
        """Only list keys starting with ``prefix``."""
        self.query.insert("prefix", prefix)

    def with_delimiter(self, delimiter: str) -> None:
        """Group keys sharing a prefix up to ``delimiter``."""
        self.query.insert("delimiter", delimiter)

    def with_start_after(self, start_after: str) -> None:
        """Start listing after the key ``start_after``."""
        self.query.insert("start-after", start_after)

    def with_continuation_token(self, token: str) -> None:
        """Continue a truncated listing."""
        self.query.insert("continuation-token", token)

    def with_max_keys(self, max_keys: int) -> None:
        """Return at most ``max_keys`` keys (S3 defaults to 1000)."""
        self.query.insert("max-keys", str(max_keys))

    @staticmethod
    def parse_response(document: str | bytes) -> ListObjectsV2Response:
        """Decode a ``ListBucketResult`` document.

        An ``Owner`` whose ``ID`` and ``DisplayName`` are both empty (what
        S3 returns when ``fetch-owner`` is off) is reported as None.

        Raises:
            ResponseParseError: If the document is malformed.
        """
        root = _xml.parse(document)

        contents = []
        for element in _xml.children(root, "Contents"):
            owner = None
            owner_element = _xml.child(element, "Owner")
            if owner_element is not None:
                owner_id = _xml.required_text(owner_element, "ID")
                display_name = _xml.required_text(owner_element, "DisplayName")
                if owner_id or display_name:
                    owner = ListObjectsOwner(owner_id, display_name)
            contents.append(
                ListObjectsContent(
                    etag=_xml.required_text(element, "ETag"),
                    key=_xml.required_text(element, "Key"),
                    last_modified=_xml.required_text(element, "LastModified"),
                    owner=owner,
                    size=_xml.required_int(element, "Size"),
                    storage_class=_xml.text(element, "StorageClass"),
                )
            )

        common_prefixes = tuple(
            CommonPrefixes(_xml.required_text(element, "Prefix"))
            for element in _xml.children(root, "CommonPrefixes")
        )

        return ListObjectsV2Response(
            contents=tuple(contents),
            max_keys=_xml.optional_int(root, "MaxKeys"),
            common_prefixes=common_prefixes,
            next_continuation_token=_xml.text(root, "NextContinuationToken"),
            start_after=_xml.text(root, "StartAfter"),
        )

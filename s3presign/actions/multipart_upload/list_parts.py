# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""List the parts uploaded so far for a multipart upload.

A response with ``next_part_number_marker`` set is truncated; call
``set_part_number_marker`` with it to fetch the next page.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from s3presign.actions import _xml
from s3presign.actions.base import CredentialsSource, ObjectAction
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


@dataclass(frozen=True)
class PartsContent:
    number: int
    etag: str
    last_modified: str
    size: int


@dataclass(frozen=True)
class ListPartsResponse:
    parts: tuple[PartsContent, ...]
    max_parts: int
    next_part_number_marker: int | None


class ListParts(ObjectAction):
    METHOD = Method.GET

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        key: str,
        upload_id: str,
    ) -> None:
        super().__init__(bucket, credentials, key)
        self.upload_id = upload_id

    def set_max_parts(self, max_parts: int) -> None:
        self.query.insert("max-parts", str(max_parts))

    def set_part_number_marker(self, part_number_marker: int) -> None:
        self.query.insert("part-number-marker", str(part_number_marker))

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("uploadId", self.upload_id)]

    @staticmethod
    def parse_response(document: str | bytes) -> ListPartsResponse:
        """Decode a ``ListPartsResult`` document.

        ``next_part_number_marker`` is None unless the listing is
        truncated.

        Raises:
            ResponseParseError: If the document is malformed.
        """
        root = _xml.parse(document)
        parts = tuple(
            PartsContent(
                number=_xml.required_int(element, "PartNumber"),
                etag=_xml.required_text(element, "ETag"),
                last_modified=_xml.required_text(element, "LastModified"),
                size=_xml.required_int(element, "Size"),
            )
            for element in _xml.children(root, "Part")
        )
        next_marker = None
        if _xml.optional_bool(root, "IsTruncated"):
            next_marker = _xml.optional_int(root, "NextPartNumberMarker")
        return ListPartsResponse(
            parts=parts,
            max_parts=_xml.required_int(root, "MaxParts"),
            next_part_number_marker=next_marker,
        )

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""DeleteObjects: delete up to 1000 keys with a single ``POST``."""

from __future__ import annotations

import base64
import hashlib
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from s3presign.actions import _xml
from s3presign.actions.base import CredentialsSource, S3Action
from s3presign.method import Method


if TYPE_CHECKING:
    from s3presign.bucket import Bucket


@dataclass(frozen=True)
class ObjectIdentifier:
    """Key (and optionally version) of an object to delete."""

    key: str
    version_id: str | None = None


@dataclass(frozen=True)
class DeletedObject:
    key: str
    version_id: str | None
    delete_marker: bool | None
    delete_marker_version_id: str | None


@dataclass(frozen=True)
class ErrorObject:
    key: str
    version_id: str | None
    code: str
    message: str


@dataclass(frozen=True)
class DeleteObjectsResponse:
    deleted: tuple[DeletedObject, ...]
    errors: tuple[ErrorObject, ...]

    @classmethod
    def parse(cls, document: str | bytes) -> DeleteObjectsResponse:
        """Decode a ``DeleteResult`` document.

        Raises:
            ResponseParseError: If the document is malformed.
        """
        root = _xml.parse(document)
        deleted = tuple(
            DeletedObject(
                key=_xml.required_text(element, "Key"),
                version_id=_xml.text(element, "VersionId"),
                delete_marker=_xml.optional_bool(element, "DeleteMarker"),
                delete_marker_version_id=_xml.text(
                    element, "DeleteMarkerVersionId"
                ),
            )
            for element in _xml.children(root, "Deleted")
        )
        # S3 documents <Error>, some compatible servers send <Errors>
        error_elements = _xml.children(root, "Error") + _xml.children(
            root, "Errors"
        )
        errors = tuple(
            ErrorObject(
                key=_xml.required_text(element, "Key"),
                version_id=_xml.text(element, "VersionId"),
                code=_xml.required_text(element, "Code"),
                message=_xml.required_text(element, "Message"),
            )
            for element in error_elements
        )
        return cls(deleted=deleted, errors=errors)


class DeleteObjects(S3Action):
    """Delete multiple objects (``POST /?delete``).

    The request body comes from ``body_with_md5()``; S3 requires the
    returned digest to be sent as the ``Content-MD5`` header.
    """

    METHOD = Method.POST

    def __init__(
        self,
        bucket: Bucket,
        credentials: CredentialsSource,
        objects: Iterable[ObjectIdentifier],
        quiet: bool = False,
    ) -> None:
        super().__init__(bucket, credentials)
        self.objects = list(objects)
        self.quiet = quiet

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("delete", "1")]

    def body_with_md5(self) -> tuple[str, str]:
        """Build the XML request body.

        Returns:
            Tuple of (body, base64-encoded MD5 digest of the body).
        """
        root = ET.Element("Delete")
        for obj in self.objects:
            element = ET.SubElement(root, "Object")
            ET.SubElement(element, "Key").text = obj.key
            if obj.version_id is not None:
                ET.SubElement(element, "VersionId").text = obj.version_id
        if self.quiet:
            ET.SubElement(root, "Quiet").text = "true"

        body = ET.tostring(root, encoding="unicode")
        digest = hashlib.md5(body.encode("utf-8"), usedforsecurity=False)
        return body, base64.b64encode(digest.digest()).decode("ascii")

    @staticmethod
    def parse_response(document: str | bytes) -> DeleteObjectsResponse:
        return DeleteObjectsResponse.parse(document)

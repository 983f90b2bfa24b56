# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Namespace-agnostic helpers for decoding S3 XML responses."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from s3presign.errors import ResponseParseError


def parse(document: str | bytes) -> ET.Element:
    """Parse an XML document into its root element.

    Raises:
        ResponseParseError: If the document is not well-formed.
    """
    try:
        return ET.fromstring(document.strip())
    except ET.ParseError as e:
        raise ResponseParseError(f"Invalid XML response: {e}") from e


def local_name(element: ET.Element) -> str:
    """Tag name without the ``{namespace}`` prefix."""
    return element.tag.rpartition("}")[2]


def children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if local_name(child) == name]


def child(element: ET.Element, name: str) -> ET.Element | None:
    for candidate in element:
        if local_name(candidate) == name:
            return candidate
    return None


def text(element: ET.Element, name: str) -> str | None:
    """Text of child ``name``; empty elements yield ``""``."""
    found = child(element, name)
    if found is None:
        return None
    return found.text or ""


def required_text(element: ET.Element, name: str) -> str:
    value = text(element, name)
    if value is None:
        raise ResponseParseError(
            f"<{local_name(element)}> is missing <{name}>"
        )
    return value


def optional_int(element: ET.Element, name: str) -> int | None:
    value = text(element, name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ResponseParseError(
            f"<{name}> is not an integer: {value!r}"
        ) from e


def required_int(element: ET.Element, name: str) -> int:
    value = optional_int(element, name)
    if value is None:
        raise ResponseParseError(
            f"<{local_name(element)}> is missing <{name}>"
        )
    return value


def optional_bool(element: ET.Element, name: str) -> bool | None:
    value = text(element, name)
    if value is None:
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise ResponseParseError(f"<{name}> is not a boolean: {value!r}")

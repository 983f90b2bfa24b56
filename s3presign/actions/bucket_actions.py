# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Bucket lifecycle actions."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass

from s3presign.actions.base import S3Action
from s3presign.errors import ResponseParseError
from s3presign.method import Method


class CreateBucket(S3Action):
    """Create a new bucket (``PUT /``)."""

    METHOD = Method.PUT


class DeleteBucket(S3Action):
    """Delete an empty bucket (``DELETE /``)."""

    METHOD = Method.DELETE


class HeadBucket(S3Action):
    """Check that a bucket exists and is accessible (``HEAD /``)."""

    METHOD = Method.HEAD


@dataclass(frozen=True)
class GetBucketPolicyResponse:
    """Top-level fields of a bucket policy document."""

    version: str
    id: str | None = None


class GetBucketPolicy(S3Action):
    """Retrieve the bucket policy (``GET /?policy``)."""

    METHOD = Method.GET

    def fixed_query(self) -> Iterable[tuple[str, str]]:
        return [("policy", "")]

    @staticmethod
    def parse_response(document: str | bytes) -> GetBucketPolicyResponse:
        """Decode the JSON policy returned by S3.

        Raises:
            ResponseParseError: If the document is not a JSON object with a
                string ``Version``.
        """
        try:
            raw = json.loads(document)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Invalid policy JSON: {e}") from e
        if not isinstance(raw, dict) or not isinstance(
            raw.get("Version"), str
        ):
            raise ResponseParseError("Policy document has no Version")
        policy_id = raw.get("Id")
        if policy_id is not None and not isinstance(policy_id, str):
            raise ResponseParseError("Policy Id must be a string")
        return GetBucketPolicyResponse(version=raw["Version"], id=policy_id)

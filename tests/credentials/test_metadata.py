# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for the EC2 instance metadata credentials document."""

from datetime import UTC, datetime

import pytest

from s3presign.credentials import (
    Credentials,
    Ec2SecurityCredentialsMetadataResponse,
    RotatingCredentials,
)
from s3presign.errors import ResponseParseError


DOCUMENT = """{
  "Code" : "Success",
  "LastUpdated" : "2020-12-28T16:47:50Z",
  "Type" : "AWS-HMAC",
  "AccessKeyId" : "some_access_key",
  "SecretAccessKey" : "some_secret_key",
  "Token" : "some_token",
  "Expiration" : "2020-12-28T23:10:09Z"
}"""


class TestDeserialize:
    """Tests for Ec2SecurityCredentialsMetadataResponse.deserialize."""

    def test_parse(self) -> None:
        """All fields are decoded, expiration as aware UTC."""
        meta = Ec2SecurityCredentialsMetadataResponse.deserialize(DOCUMENT)
        assert meta.key == "some_access_key"
        assert meta.secret == "some_secret_key"
        assert meta.token == "some_token"
        assert meta.expiration == datetime(2020, 12, 28, 23, 10, 9, tzinfo=UTC)

    def test_repr_hides_secret(self) -> None:
        """Secret and token are left out of repr."""
        meta = Ec2SecurityCredentialsMetadataResponse.deserialize(DOCUMENT)
        assert "some_secret_key" not in repr(meta)
        assert "some_token" not in repr(meta)

    def test_into_credentials(self) -> None:
        """Converts to a Credentials snapshot."""
        meta = Ec2SecurityCredentialsMetadataResponse.deserialize(DOCUMENT)
        assert meta.into_credentials() == Credentials(
            "some_access_key", "some_secret_key", "some_token"
        )

    def test_rotate_credentials(self) -> None:
        """Installs itself into a rotating holder."""
        rotating = RotatingCredentials("old", "old_secret", None)
        meta = Ec2SecurityCredentialsMetadataResponse.deserialize(DOCUMENT)
        meta.rotate_credentials(rotating)
        assert rotating.current() == meta.into_credentials()

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            '{"AccessKeyId": "a", "SecretAccessKey": "b", "Token": "c"}',
            '{"AccessKeyId": "a", "SecretAccessKey": "b", "Token": "c", '
            '"Expiration": "yesterday"}',
            '{"AccessKeyId": "a", "SecretAccessKey": "b", "Token": "c", '
            '"Expiration": 5}',
        ],
    )
    def test_malformed(self, text: str) -> None:
        """Malformed documents raise ResponseParseError."""
        with pytest.raises(ResponseParseError):
            Ec2SecurityCredentialsMetadataResponse.deserialize(text)

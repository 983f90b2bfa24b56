# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""EC2 instance metadata security-credentials document.

The instance metadata service returns JSON of the form::

    {
        "Code": "Success",
        "Type": "AWS-HMAC",
        "AccessKeyId": "...",
        "SecretAccessKey": "...",
        "Token": "...",
        "Expiration": "2020-12-28T23:10:09Z"
    }

Fetching it is up to the caller; this module only decodes it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime

from s3presign.credentials.credentials import Credentials
from s3presign.credentials.rotating import RotatingCredentials
from s3presign.errors import ResponseParseError


EXPIRATION_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Ec2SecurityCredentialsMetadataResponse:
    """Decoded security credentials from the instance metadata service.

    Attributes:
        key: Access key ID.
        secret: Secret access key.
        token: Session token.
        expiration: When the credentials expire (UTC).
    """

    key: str
    secret: str = field(repr=False)
    token: str = field(repr=False)
    expiration: datetime

    @classmethod
    def deserialize(
        cls, text: str | bytes
    ) -> Ec2SecurityCredentialsMetadataResponse:
        """Parse the metadata JSON document.

        Raises:
            ResponseParseError: If the document is not valid JSON, a field
                is missing, or the expiration has the wrong format.
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Invalid metadata JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ResponseParseError("Metadata document must be an object")

        try:
            key = raw["AccessKeyId"]
            secret = raw["SecretAccessKey"]
            token = raw["Token"]
            expiration_str = raw["Expiration"]
        except KeyError as e:
            raise ResponseParseError(
                f"Metadata document missing field {e.args[0]!r}"
            ) from e

        try:
            expiration = datetime.strptime(
                expiration_str, EXPIRATION_FORMAT
            ).replace(tzinfo=UTC)
        except (TypeError, ValueError) as e:
            raise ResponseParseError(
                f"Invalid Expiration {expiration_str!r}"
            ) from e

        return cls(key=key, secret=secret, token=token, expiration=expiration)

    def into_credentials(self) -> Credentials:
        """Build a ``Credentials`` snapshot from this document."""
        return Credentials(self.key, self.secret, self.token)

    def rotate_credentials(self, rotating: RotatingCredentials) -> None:
        """Install these credentials into a ``RotatingCredentials`` holder."""
        rotating.update(self.key, self.secret, self.token)

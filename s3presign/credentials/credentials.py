# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Access key / secret key / session token triple."""

from __future__ import annotations

import hmac
import os
from collections.abc import Iterator
from contextlib import contextmanager

from s3presign.secret import scrubbed, wipe


class Credentials:
    """Immutable S3 credentials.

    The secret is held in a private ``bytearray`` that is overwritten when
    the object is garbage collected.  Only the access key ever appears in
    ``repr`` output.

    Args:
        key: Access key ID.
        secret: Secret access key.
        token: Optional STS session token.
    """

    __slots__ = ("_key", "_secret", "_token")

    def __init__(
        self,
        key: str,
        secret: str | bytes | bytearray,
        token: str | None = None,
    ) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._key = key
        self._secret = bytearray(secret)
        self._token = token

    @classmethod
    def from_env(cls) -> Credentials | None:
        """Build credentials from the standard AWS environment variables.

        Reads ``AWS_ACCESS_KEY_ID`` and ``AWS_SECRET_ACCESS_KEY``, plus
        ``AWS_SESSION_TOKEN`` when set.

        Returns:
            Credentials, or None if the key or the secret is unset.
        """
        key = os.environ.get("AWS_ACCESS_KEY_ID")
        secret = os.environ.get("AWS_SECRET_ACCESS_KEY")
        if key is None or secret is None:
            return None
        return cls(key, secret, os.environ.get("AWS_SESSION_TOKEN"))

    @property
    def key(self) -> str:
        """Access key ID."""
        return self._key

    @property
    def secret(self) -> str:
        """Secret access key, as a new string.

        Prefer ``exposed_secret()`` for anything long-lived: Python strings
        cannot be wiped.
        """
        return self._secret.decode("utf-8")

    @property
    def token(self) -> str | None:
        """Session token, if any."""
        return self._token

    @contextmanager
    def exposed_secret(self) -> Iterator[bytearray]:
        """Yield a scratch copy of the secret that is zeroed on exit."""
        with scrubbed(self._secret) as buffer:
            yield buffer

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return (
            self._key == other._key
            and self._token == other._token
            and hmac.compare_digest(self._secret, other._secret)
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Credentials:
        # Each instance owns its buffer; __del__ wipes it
        return Credentials(self._key, self._secret, self._token)

    def __deepcopy__(self, memo: dict[int, object]) -> Credentials:
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Credentials(key={self._key!r}, ...)"

    def __del__(self) -> None:
        secret = getattr(self, "_secret", None)
        if secret is not None:
            wipe(secret)

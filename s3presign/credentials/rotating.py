# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Credentials that can be replaced while signing is in progress.

Readers grab the current immutable ``Credentials`` snapshot once per
signing call and use it without further synchronization.  Writers build a
complete new snapshot first and then swap a single reference, so a reader
can never observe a key from one rotation with a secret from another.
Only writers take the lock.
"""

from __future__ import annotations

import logging
import threading

from s3presign.credentials.credentials import Credentials


logger = logging.getLogger(__name__)


class RotatingCredentials:
    """Shared holder for credentials that get refreshed (e.g. STS).

    Args:
        key: Initial access key ID.
        secret: Initial secret access key.
        token: Initial session token.
    """

    def __init__(self, key: str, secret: str, token: str | None) -> None:
        self._current = Credentials(key, secret, token)
        self._write_lock = threading.Lock()

    def current(self) -> Credentials:
        """Return the current snapshot (never blocks)."""
        return self._current

    def update(self, key: str, secret: str, token: str | None) -> None:
        """Replace the credentials with a new snapshot.

        Args:
            key: New access key ID.
            secret: New secret access key.
            token: New session token.
        """
        snapshot = Credentials(key, secret, token)
        with self._write_lock:
            self._current = snapshot
        logger.debug("Rotated credentials to access key %s", key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotatingCredentials):
            return NotImplemented
        return self._current == other._current

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RotatingCredentials({self._current!r})"


def resolve_credentials(
    credentials: Credentials | RotatingCredentials | None,
) -> Credentials | None:
    """Take a single snapshot of ``credentials`` for one signing call."""
    if isinstance(credentials, RotatingCredentials):
        return credentials.current()
    return credentials

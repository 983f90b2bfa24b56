# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Logging setup for entry points, with redaction of credentials.

Library modules log through ``logging.getLogger(__name__)``, only at DEBUG,
and never pass secret keys or derived keys to a logger.  A presigned URL
is itself a bearer credential, though: anyone holding its signature (and
session token) can use it until it expires.  ``SecretFilter`` therefore
scrubs those query values, plus any explicitly registered secrets, from
every record a handler emits.

Usage:
    from s3presign.logging import configure_logging
    configure_logging(level=logging.DEBUG)
"""

import logging
import re
from typing import ClassVar


REDACTED = "[REDACTED]"

#: Query parameters of a presigned URL whose values grant access.
_URL_SECRET_PARAMS = re.compile(
    r"(X-Amz-(?:Signature|Security-Token)=)[^&\s\"'<>]+"
)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SecretFilter(logging.Filter):
    """Handler filter that rewrites records containing secrets.

    The record's message is formatted once; if redaction changes it, the
    record is replaced by the redacted text with no arguments.  Records
    without secrets are passed on untouched and are never dropped.

    Registered secrets are process-wide, so every ``SecretFilter``
    instance shares them.
    """

    _secrets: ClassVar[frozenset[str]] = frozenset()
    _pattern: ClassVar[re.Pattern[str] | None] = None

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True

    @classmethod
    def redact(cls, text: str) -> str:
        """Return ``text`` with registered secrets and URL signatures
        replaced by ``[REDACTED]``."""
        pattern = cls._pattern
        if pattern is not None:
            text = pattern.sub(REDACTED, text)
        return _URL_SECRET_PARAMS.sub(rf"\g<1>{REDACTED}", text)

    @classmethod
    def register_secret(cls, *secrets: str) -> None:
        """Add values to redact from all log output.

        Empty strings are ignored.
        """
        added = {secret for secret in secrets if secret}
        if not added - cls._secrets:
            return
        cls._secrets = cls._secrets | added
        # Longest first, so a secret containing another is fully replaced
        alternatives = sorted(cls._secrets, key=len, reverse=True)
        cls._pattern = re.compile("|".join(map(re.escape, alternatives)))

    @classmethod
    def clear_secrets(cls) -> None:
        """Forget every registered secret (tests use this between cases)."""
        cls._secrets = frozenset()
        cls._pattern = None


def configure_logging(
    level: int = logging.WARNING,
    format_string: str | None = None,
    add_secret_filter: bool = True,
) -> None:
    """Route log output of a command line run to stderr.

    Replaces any handlers already installed on the root logger, so calling
    it again reconfigures instead of duplicating output.

    Args:
        level: Root logger level.
        format_string: Record format, ``DEFAULT_FORMAT`` if None.
        add_secret_filter: Attach ``SecretFilter`` to the handler.
    """
    handler = logging.StreamHandler()
    if add_secret_filter:
        handler.addFilter(SecretFilter())
    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[handler],
        force=True,
    )

# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""s3presign CLI: multi-command entry point.

Subcommands:

* ``init``  - create a stub config file
* ``check`` - load the config and show the bucket it points at
* ``sign``  - print a presigned URL for an S3 action
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import timedelta
from pathlib import Path

from s3presign.actions import CompleteMultipartUpload, S3Action
from s3presign.bucket import Bucket
from s3presign.config import (
    MAX_EXPIRES_SECONDS,
    ConfigError,
    PresignConfig,
    get_config_path,
)
from s3presign.credentials import Credentials
from s3presign.logging import configure_logging


logger = logging.getLogger(__name__)

_USAGE = """\
usage: s3presign <command> [args]

commands:
  init   Create a stub config file
  check  Verify the config file
  sign   Print a presigned URL

Run 's3presign <command> --help' for command-specific help.\
"""

#: Actions that operate on a single object and need a key.
_OBJECT_ACTIONS = frozenset(
    {
        "get",
        "head",
        "put",
        "delete",
        "create-multipart",
        "upload-part",
        "complete-multipart",
        "abort-multipart",
        "list-parts",
    }
)
#: Actions that also need ``--upload-id``.
_UPLOAD_ACTIONS = frozenset(
    {"upload-part", "complete-multipart", "abort-multipart", "list-parts"}
)
_SIGN_ACTIONS = sorted(_OBJECT_ACTIONS | {"list"})


# -- Terminal colors ---------------------------------------------------


def _use_color() -> bool:
    """Color only on a TTY, unless ``NO_COLOR`` or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return sys.stdout.isatty()


class _Style:
    """ANSI escape helpers.  All methods return plain text when color is off."""

    def __init__(self, color: bool) -> None:
        self._on = color

    def _wrap(self, code: str, text: str) -> str:
        if not self._on:
            return text
        return f"\033[{code}m{text}\033[0m"

    def bold(self, text: str) -> str:
        return self._wrap("1", text)

    def green(self, text: str) -> str:
        return self._wrap("32", text)

    def red(self, text: str) -> str:
        return self._wrap("31", text)

    def dim(self, text: str) -> str:
        return self._wrap("2", text)


# -- Argument helpers --------------------------------------------------


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help=(
            "Path to s3presign.yaml config file"
            " (default: ~/.config/s3presign/s3presign.yaml)"
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )


def _key_value(text: str) -> tuple[str, str]:
    """Parse ``NAME=VALUE`` (the value may be empty)."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def _expires(text: str) -> int:
    try:
        seconds = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a number of seconds, got {text!r}"
        ) from None
    if not 1 <= seconds <= MAX_EXPIRES_SECONDS:
        raise argparse.ArgumentTypeError(
            f"must be between 1 and {MAX_EXPIRES_SECONDS} seconds"
        )
    return seconds


# -- init subcommand ---------------------------------------------------


def cmd_init(argv: list[str]) -> int:
    """Create a stub configuration file.

    Creates ``~/.config/s3presign/s3presign.yaml`` (or ``--config``) with a
    minimal commented template if the file does not already exist.

    Args:
        argv: Command arguments.

    Returns:
        Exit code (always 0).
    """
    parser = argparse.ArgumentParser(
        prog="s3presign init", description="Create a stub config file"
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    config_path = args.config or get_config_path()
    if config_path.exists():
        print(f"Config already exists: {config_path}")
        return 0

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(_STUB_CONFIG)
    print(f"Created stub config: {config_path}")
    return 0


# -- check subcommand --------------------------------------------------


def cmd_check(argv: list[str]) -> int:
    """Load the configuration and print what it resolves to.

    Args:
        argv: Command arguments.

    Returns:
        0 if the configuration is usable, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        prog="s3presign check", description="Verify the config file"
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    s = _Style(_use_color())
    config_path = args.config or get_config_path()
    print(s.bold("Configuration"))
    print(f"  Config file: {s.dim(str(config_path))}")

    try:
        config = PresignConfig.from_yaml(config_path)
        bucket = config.make_bucket()
    except ConfigError as e:
        print(f"  Status:      {s.red('error')} - {e}")
        return 1

    mode = "anonymous" if config.anonymous else "signed"
    print(f"  Status:      {s.green('ok')}")
    print(f"  Bucket URL:  {bucket.base_url}")
    print(f"  Region:      {bucket.region}")
    print(f"  Mode:        {mode}")
    if not config.anonymous:
        print(f"  Access key:  {config.access_key_id}")
    return 0


# -- sign subcommand ---------------------------------------------------


def _build_action(
    args: argparse.Namespace,
    bucket: Bucket,
    credentials: Credentials | None,
) -> S3Action:
    """Instantiate the action selected on the command line."""
    action = args.action
    key = args.key
    upload_id = args.upload_id

    if action == "list":
        return bucket.list_objects_v2(credentials)
    if action == "get":
        return bucket.get_object(credentials, key)
    if action == "head":
        return bucket.head_object(credentials, key)
    if action == "put":
        return bucket.put_object(credentials, key)
    if action == "delete":
        return bucket.delete_object(credentials, key)
    if action == "create-multipart":
        return bucket.create_multipart_upload(credentials, key)
    if action == "upload-part":
        return bucket.upload_part(
            credentials, key, args.part_number, upload_id
        )
    if action == "complete-multipart":
        return bucket.complete_multipart_upload(
            credentials, key, upload_id, args.etag
        )
    if action == "abort-multipart":
        return bucket.abort_multipart_upload(credentials, key, upload_id)
    return bucket.list_parts(credentials, key, upload_id)


def cmd_sign(argv: list[str]) -> int:
    """Print a presigned URL for one S3 action.

    Args:
        argv: Command arguments.

    Returns:
        0 on success, 1 on configuration errors, 2 on usage errors.
    """
    parser = argparse.ArgumentParser(
        prog="s3presign sign", description="Print a presigned URL"
    )
    _add_common_arguments(parser)
    parser.add_argument("action", choices=_SIGN_ACTIONS)
    parser.add_argument("key", nargs="?", help="Object key")
    parser.add_argument(
        "--expires",
        type=_expires,
        default=None,
        metavar="SECONDS",
        help="Validity of the URL (default: from config)",
    )
    parser.add_argument(
        "--query",
        type=_key_value,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Extra query parameter (repeatable)",
    )
    parser.add_argument(
        "--header",
        type=_key_value,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Extra signed header; must be sent with the request",
    )
    parser.add_argument("--upload-id", metavar="ID")
    parser.add_argument("--part-number", type=int, default=1, metavar="N")
    parser.add_argument(
        "--etag",
        action="append",
        default=[],
        help="Part ETag for complete-multipart, in part order (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.action in _OBJECT_ACTIONS and not args.key:
        print(f"s3presign: '{args.action}' needs a key", file=sys.stderr)
        return 2
    if args.action in _UPLOAD_ACTIONS and not args.upload_id:
        print(
            f"s3presign: '{args.action}' needs --upload-id", file=sys.stderr
        )
        return 2

    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = PresignConfig.from_yaml(args.config)
        bucket = config.make_bucket()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    action = _build_action(args, bucket, config.make_credentials())
    for name, value in args.query:
        action.query.insert(name, value)
    for name, value in args.header:
        action.headers.insert(name, value)

    expires = args.expires or config.default_expires_seconds
    print(action.sign(timedelta(seconds=expires)))

    if isinstance(action, CompleteMultipartUpload) and action.etags:
        print(action.body())
    return 0


# -- CLI plumbing ------------------------------------------------------


_DISPATCH: dict[str, str] = {
    "init": "cmd_init",
    "check": "cmd_check",
    "sign": "cmd_sign",
}


def cli() -> None:
    """Entry point for ``s3presign``.

    With no arguments, prints usage information.
    """
    argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help"):
        print(_USAGE)
        sys.exit(0)

    if argv[0] not in _DISPATCH:
        print(f"s3presign: unknown command '{argv[0]}'", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    # Look up handler by name so tests can mock individual commands.
    handler = getattr(sys.modules[__name__], _DISPATCH[argv[0]])
    sys.exit(handler(argv[1:]))


#: Stub configuration template written by ``s3presign init``.
_STUB_CONFIG = """\
# s3presign configuration
#
# Values can reference environment variables with !env; a .env file next
# to this one (or in the current directory) is loaded first.

endpoint: https://s3.us-east-1.amazonaws.com
bucket: my-bucket
region: us-east-1

# path (https://endpoint/bucket/key) or
# virtual-host (https://bucket.endpoint/key)
url_style: virtual-host

# Validity of generated URLs, 1 to 604800 seconds.
default_expires_seconds: 3600

# Omit this section to generate anonymous (unsigned) URLs.
credentials:
  access_key_id: !env AWS_ACCESS_KEY_ID
  secret_access_key: !env AWS_SECRET_ACCESS_KEY
  session_token: !env AWS_SESSION_TOKEN
"""

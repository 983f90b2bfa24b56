# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Idempotent ``.env`` loading ahead of ``!env`` resolution.

Two locations are read, in order:

1. ``~/.config/s3presign/.env`` (XDG config directory)
2. ``.env`` in the current working directory

Variables set by the first file are not overwritten by the second, and
neither overrides variables already present in the environment.
"""

import logging
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_config_path


logger = logging.getLogger(__name__)

#: Application name for XDG path resolution.
APP_NAME = "s3presign"

_dotenv_loaded = False


def get_dotenv_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/s3presign/.env``."""
    return user_config_path(APP_NAME) / ".env"


def _candidates() -> tuple[Path, ...]:
    return (get_dotenv_path(), Path.cwd() / ".env")


def load_dotenv_once() -> None:
    """Load .env files once; later calls do nothing."""
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    _dotenv_loaded = True

    for env_file in _candidates():
        if env_file.exists():
            load_dotenv(env_file)
            logger.debug("Loaded .env from %s", env_file)


def reset_dotenv_state() -> None:
    """Forget that .env files were loaded (tests only)."""
    global _dotenv_loaded
    _dotenv_loaded = False

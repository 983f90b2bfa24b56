# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Configuration for the s3presign command line tool.

The config is a YAML file whose default location follows the XDG Base
Directory Specification:

    ``$XDG_CONFIG_HOME/s3presign/s3presign.yaml``
    (typically ``~/.config/s3presign/s3presign.yaml``)

``!env`` tags resolve values from environment variables, after ``.env``
files have been loaded.  Example::

    endpoint: https://s3.eu-west-1.amazonaws.com
    bucket: my-bucket
    region: eu-west-1
    url_style: virtual-host
    default_expires_seconds: 3600
    credentials:
      access_key_id: !env AWS_ACCESS_KEY_ID
      secret_access_key: !env AWS_SECRET_ACCESS_KEY
      session_token: !env AWS_SESSION_TOKEN

Without a ``credentials`` section, or when both keys resolve to nothing,
URLs are generated anonymously.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from platformdirs import user_config_path

from s3presign.bucket import Bucket, UrlStyle
from s3presign.credentials import Credentials
from s3presign.dotenv_loader import APP_NAME, load_dotenv_once
from s3presign.errors import BucketError, S3PresignError
from s3presign.logging import SecretFilter


logger = logging.getLogger(__name__)

#: Longest validity S3 accepts for a presigned URL (7 days).
MAX_EXPIRES_SECONDS = 7 * 24 * 60 * 60
DEFAULT_EXPIRES_SECONDS = 3600


def get_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/s3presign/s3presign.yaml``."""
    return user_config_path(APP_NAME) / "s3presign.yaml"


class ConfigError(S3PresignError):
    """Invalid or missing configuration."""


# -- YAML loading ------------------------------------------------------


@dataclass(frozen=True)
class _UnsetEnv:
    """An ``!env`` tag whose variable is not set."""

    name: str


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that resolves ``!env NAME`` while parsing."""


def _construct_env(
    loader: _ConfigLoader, node: yaml.ScalarNode
) -> str | _UnsetEnv:
    name = str(loader.construct_scalar(node))
    value = os.environ.get(name)
    return _UnsetEnv(name) if value is None else value


_ConfigLoader.add_constructor("!env", _construct_env)


class _Section:
    """Typed accessors over one YAML mapping.

    Absent keys, null values and unset ``!env`` variables all count as
    missing.
    """

    def __init__(self, raw: dict, path: str = "") -> None:
        self._raw = raw
        self._path = path

    def _name(self, key: str) -> str:
        return f"{self._path}.{key}" if self._path else key

    def _missing(self, key: str) -> ConfigError:
        value = self._raw.get(key)
        if isinstance(value, _UnsetEnv):
            return ConfigError(
                f"Required config '{self._name(key)}': environment "
                f"variable '{value.name}' is not set"
            )
        return ConfigError(f"Required config '{self._name(key)}' is missing")

    def _get(self, key: str) -> object:
        value = self._raw.get(key)
        return None if isinstance(value, _UnsetEnv) else value

    def optional_text(self, key: str) -> str | None:
        value = self._get(key)
        if value is None:
            return None
        if isinstance(value, (dict, list)):
            raise ConfigError(f"'{self._name(key)}' must be a scalar")
        return str(value)

    def text(self, key: str) -> str:
        value = self.optional_text(key)
        if value is None:
            raise self._missing(key)
        return value

    def integer(self, key: str, default: int) -> int:
        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            raise ConfigError(f"'{self._name(key)}' must be an integer")
        try:
            return int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"'{self._name(key)}' must be an integer: {value!r}"
            ) from e

    def section(self, key: str) -> "_Section":
        value = self._get(key)
        if value is None:
            return _Section({}, self._name(key))
        if not isinstance(value, dict):
            raise ConfigError(f"'{self._name(key)}' must be a YAML mapping")
        return _Section(value, self._name(key))


# -- Configuration -----------------------------------------------------


@dataclass(frozen=True)
class PresignConfig:
    """Settings for generating presigned URLs.

    Attributes:
        endpoint: S3 endpoint URL.
        bucket: Bucket name.
        region: Bucket region.
        url_style: Path-style or virtual-hosted-style addressing.
        default_expires_seconds: Validity of generated URLs when not given
            explicitly (1 second to 7 days).
        access_key_id: Access key, or None for anonymous URLs.
        secret_access_key: Secret key, or None for anonymous URLs.
        session_token: Optional STS session token.
    """

    endpoint: str
    bucket: str
    region: str
    url_style: UrlStyle = UrlStyle.VIRTUAL_HOST
    default_expires_seconds: int = DEFAULT_EXPIRES_SECONDS
    access_key_id: str | None = None
    secret_access_key: str | None = field(default=None, repr=False)
    session_token: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate settings and register secrets for log redaction.

        Raises:
            ConfigError: If settings are inconsistent or out of range.
        """
        if not 1 <= self.default_expires_seconds <= MAX_EXPIRES_SECONDS:
            raise ConfigError(
                f"default_expires_seconds must be between 1 and "
                f"{MAX_EXPIRES_SECONDS}: {self.default_expires_seconds}"
            )
        if (self.access_key_id is None) != (self.secret_access_key is None):
            raise ConfigError(
                "credentials need both access_key_id and secret_access_key"
            )
        if self.session_token is not None and self.access_key_id is None:
            raise ConfigError("session_token given without credentials")

        SecretFilter.register_secret(
            self.secret_access_key or "", self.session_token or ""
        )

        logger.info(
            "Config loaded: bucket=%s region=%s endpoint=%s (%s)",
            self.bucket,
            self.region,
            self.endpoint,
            "anonymous" if self.anonymous else "signed",
        )

    @property
    def anonymous(self) -> bool:
        return self.access_key_id is None

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> "PresignConfig":
        """Load configuration from a YAML file.

        ``.env`` files are loaded first, so ``!env`` tags can refer to
        variables defined there.

        Args:
            config_path: Path to the YAML file.  Defaults to
                ``get_config_path()``.

        Returns:
            PresignConfig instance.

        Raises:
            ConfigError: If the file is missing or values are invalid.
        """
        load_dotenv_once()
        path = config_path or get_config_path()

        try:
            text = path.read_text()
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}") from None

        try:
            raw = yaml.load(text, Loader=_ConfigLoader)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must be a YAML mapping: {path}")

        return cls._from_section(_Section(raw))

    @classmethod
    def _from_section(cls, top: _Section) -> "PresignConfig":
        style = top.optional_text("url_style") or UrlStyle.VIRTUAL_HOST.value
        try:
            url_style = UrlStyle(style)
        except ValueError:
            choices = ", ".join(s.value for s in UrlStyle)
            raise ConfigError(
                f"url_style must be one of {choices}: {style!r}"
            ) from None

        credentials = top.section("credentials")
        return cls(
            endpoint=top.text("endpoint"),
            bucket=top.text("bucket"),
            region=top.text("region"),
            url_style=url_style,
            default_expires_seconds=top.integer(
                "default_expires_seconds", DEFAULT_EXPIRES_SECONDS
            ),
            access_key_id=credentials.optional_text("access_key_id"),
            secret_access_key=credentials.optional_text("secret_access_key"),
            session_token=credentials.optional_text("session_token"),
        )

    def make_bucket(self) -> Bucket:
        """Build the configured ``Bucket``.

        Raises:
            ConfigError: If the endpoint is not a usable URL.
        """
        try:
            return Bucket(
                self.endpoint, self.url_style, self.bucket, self.region
            )
        except BucketError as e:
            raise ConfigError(f"Invalid endpoint: {e}") from e

    def make_credentials(self) -> Credentials | None:
        """Build credentials, or None when configured as anonymous."""
        if self.access_key_id is None or self.secret_access_key is None:
            return None
        return Credentials(
            self.access_key_id, self.secret_access_key, self.session_token
        )

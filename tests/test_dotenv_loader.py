# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for the .env loader."""

from pathlib import Path
from unittest.mock import MagicMock, call, patch

from s3presign.dotenv_loader import (
    get_dotenv_path,
    load_dotenv_once,
    reset_dotenv_state,
)


class TestLoadDotenvOnce:
    """Tests for load_dotenv_once."""

    def setup_method(self) -> None:
        """Reset state before each test."""
        reset_dotenv_state()

    def teardown_method(self) -> None:
        """Reset state after each test."""
        reset_dotenv_state()

    def _load(self, xdg_env: Path, cwd: Path) -> MagicMock:
        mock_ld = MagicMock()
        with (
            patch("s3presign.dotenv_loader.load_dotenv", mock_ld),
            patch(
                "s3presign.dotenv_loader.get_dotenv_path",
                return_value=xdg_env,
            ),
            patch("s3presign.dotenv_loader.Path.cwd", return_value=cwd),
        ):
            load_dotenv_once()
            load_dotenv_once()
        return mock_ld

    def test_loads_both_in_order(self, tmp_path: Path) -> None:
        """XDG .env is loaded before the working directory's, once."""
        xdg_env = tmp_path / "config" / ".env"
        xdg_env.parent.mkdir()
        xdg_env.touch()
        cwd_env = tmp_path / "cwd" / ".env"
        cwd_env.parent.mkdir()
        cwd_env.touch()

        mock_ld = self._load(xdg_env, cwd_env.parent)
        assert mock_ld.call_args_list == [call(xdg_env), call(cwd_env)]

    def test_only_cwd(self, tmp_path: Path) -> None:
        """A missing XDG .env is skipped."""
        cwd_env = tmp_path / ".env"
        cwd_env.touch()
        mock_ld = self._load(tmp_path / "missing" / ".env", tmp_path)
        mock_ld.assert_called_once_with(cwd_env)

    def test_no_files(self, tmp_path: Path) -> None:
        """Nothing is loaded when neither file exists."""
        mock_ld = self._load(tmp_path / "a" / ".env", tmp_path / "b")
        mock_ld.assert_not_called()

    def test_reset(self, tmp_path: Path) -> None:
        """reset_dotenv_state allows loading again."""
        cwd_env = tmp_path / ".env"
        cwd_env.touch()
        self._load(tmp_path / "missing" / ".env", tmp_path)
        reset_dotenv_state()
        mock_ld = self._load(tmp_path / "missing" / ".env", tmp_path)
        mock_ld.assert_called_once_with(cwd_env)


class TestGetDotenvPath:
    """Tests for get_dotenv_path."""

    def test_in_app_config_dir(self) -> None:
        """The file lives in the s3presign config directory."""
        path = get_dotenv_path()
        assert path.name == ".env"
        assert path.parent.name == "s3presign"

"""Tests for Atlassian credential management."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from atlassian_rest.common.credentials import (
    DEFAULT_SERVICE,
    ENV_API_TOKEN,
    ENV_SITE,
    ENV_USER_EMAIL,
    AtlassianCredentials,
    _load_dotenv,
    delete_credentials,
    get_credentials,
    save_credentials,
)

ENV_VARS = [ENV_SITE, ENV_USER_EMAIL, ENV_API_TOKEN]


class TestGetCredentials:
    """Tests for get_credentials function."""

    def test_explicit_credentials(self) -> None:
        """Test that explicit credentials take precedence."""
        creds = get_credentials(
            site="https://test.atlassian.net",
            email="test@example.com",
            api_token="test-token",
        )
        assert creds.site == "https://test.atlassian.net"
        assert creds.email == "test@example.com"
        assert creds.api_token == "test-token"

    def test_trailing_slash_removed(self) -> None:
        """Test that trailing slash is removed from the site."""
        creds = get_credentials(
            site="https://test.atlassian.net/",
            email="test@example.com",
            api_token="test-token",
        )
        assert creds.site == "https://test.atlassian.net"

    def test_env_variables(self) -> None:
        """Test credential resolution from environment variables."""
        with patch.dict(
            os.environ,
            {
                ENV_SITE: "https://env.atlassian.net",
                ENV_USER_EMAIL: "env@example.com",
                ENV_API_TOKEN: "env-token",
            },
        ):
            creds = get_credentials()
            assert creds.site == "https://env.atlassian.net"
            assert creds.email == "env@example.com"
            assert creds.api_token == "env-token"

    def test_explicit_overrides_env(self) -> None:
        """Test that explicit params override environment variables."""
        with patch.dict(
            os.environ,
            {
                ENV_SITE: "https://env.atlassian.net",
                ENV_USER_EMAIL: "env@example.com",
                ENV_API_TOKEN: "env-token",
            },
        ):
            creds = get_credentials(site="https://explicit.atlassian.net")
            assert creds.site == "https://explicit.atlassian.net"
            assert creds.email == "env@example.com"
            assert creds.api_token == "env-token"

    @patch("atlassian_rest.common.credentials._load_dotenv", return_value={})
    @patch("atlassian_rest.common.credentials.keyring")
    def test_keyring_fallback(self, mock_keyring: MagicMock, _dotenv: MagicMock) -> None:
        """Test credential resolution from keyring."""
        mock_keyring.get_password.side_effect = lambda svc, key: {
            "site": "https://keyring.atlassian.net",
            "user_email": "keyring@example.com",
            "api_token": "keyring-token",
        }.get(key)

        with patch.dict(os.environ, {}, clear=True):
            creds = get_credentials()

        assert creds.site == "https://keyring.atlassian.net"
        assert creds.email == "keyring@example.com"
        assert creds.api_token == "keyring-token"
        mock_keyring.get_password.assert_any_call(DEFAULT_SERVICE, "site")

    @patch("atlassian_rest.common.credentials._load_dotenv", return_value={})
    @patch("atlassian_rest.common.credentials.keyring")
    def test_site_only_is_anonymous(self, mock_keyring: MagicMock, _dotenv: MagicMock) -> None:
        """Test that a site without email and token resolves to empty credentials."""
        mock_keyring.get_password.return_value = None

        with patch.dict(os.environ, {ENV_SITE: "https://env.atlassian.net"}, clear=True):
            creds = get_credentials()

        assert creds == AtlassianCredentials("https://env.atlassian.net", "", "")

    @patch("atlassian_rest.common.credentials._load_dotenv", return_value={})
    @patch("atlassian_rest.common.credentials.keyring")
    def test_missing_site_raises(self, mock_keyring: MagicMock, _dotenv: MagicMock) -> None:
        """Test that a missing site raises ValueError."""
        mock_keyring.get_password.return_value = None

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError) as exc_info:
                get_credentials()

        assert ENV_SITE in str(exc_info.value)

    @patch("atlassian_rest.common.credentials.keyring")
    def test_dotenv_fallback(self, mock_keyring: MagicMock, tmp_path: Path) -> None:
        """Test that a .env file fills values no other source provides."""
        mock_keyring.get_password.return_value = None
        (tmp_path / ".env").write_text(
            f"{ENV_SITE}=https://dotenv.atlassian.net\n{ENV_USER_EMAIL}=dot@example.com\n"
        )

        original_cwd = os.getcwd()
        try:
            os.chdir(tmp_path)
            with patch.dict(os.environ, {ENV_API_TOKEN: "env-token"}, clear=True):
                creds = get_credentials()
        finally:
            os.chdir(original_cwd)

        assert creds.site == "https://dotenv.atlassian.net"
        assert creds.email == "dot@example.com"
        assert creds.api_token == "env-token"


class TestSaveCredentials:
    """Tests for save_credentials function."""

    @patch("atlassian_rest.common.credentials.keyring")
    def test_save_credentials(self, mock_keyring: MagicMock) -> None:
        """Test saving credentials to keyring."""
        save_credentials(
            site="https://test.atlassian.net",
            email="test@example.com",
            api_token="test-token",
        )

        assert mock_keyring.set_password.call_count == 3
        mock_keyring.set_password.assert_any_call(
            DEFAULT_SERVICE, "site", "https://test.atlassian.net"
        )
        mock_keyring.set_password.assert_any_call(DEFAULT_SERVICE, "user_email", "test@example.com")
        mock_keyring.set_password.assert_any_call(DEFAULT_SERVICE, "api_token", "test-token")

    @patch("atlassian_rest.common.credentials.keyring")
    def test_save_with_custom_service(self, mock_keyring: MagicMock) -> None:
        """Test saving credentials with custom service name."""
        save_credentials(
            site="https://test.atlassian.net",
            email="test@example.com",
            api_token="test-token",
            service="custom-service",
        )

        mock_keyring.set_password.assert_any_call(
            "custom-service", "site", "https://test.atlassian.net"
        )


class TestDeleteCredentials:
    """Tests for delete_credentials function."""

    @patch("atlassian_rest.common.credentials.keyring")
    def test_delete_credentials(self, mock_keyring: MagicMock) -> None:
        """Test deleting credentials from keyring."""
        mock_keyring.errors.PasswordDeleteError = Exception

        delete_credentials()

        assert mock_keyring.delete_password.call_count == 3
        mock_keyring.delete_password.assert_any_call(DEFAULT_SERVICE, "site")
        mock_keyring.delete_password.assert_any_call(DEFAULT_SERVICE, "user_email")
        mock_keyring.delete_password.assert_any_call(DEFAULT_SERVICE, "api_token")

    @patch("atlassian_rest.common.credentials.keyring")
    def test_delete_handles_missing(self, mock_keyring: MagicMock) -> None:
        """Test that delete handles missing credentials gracefully."""

        class PasswordDeleteError(Exception):
            pass

        mock_keyring.errors.PasswordDeleteError = PasswordDeleteError
        mock_keyring.delete_password.side_effect = PasswordDeleteError

        # Should not raise
        delete_credentials()


class TestLoadDotenv:
    """Tests for _load_dotenv function."""

    def _load_from(self, directory: Path) -> dict[str, str]:
        original_cwd = os.getcwd()
        try:
            os.chdir(directory)
            return _load_dotenv()
        finally:
            os.chdir(original_cwd)

    def test_load_dotenv_basic(self, tmp_path: Path) -> None:
        """Test loading basic .env file."""
        (tmp_path / ".env").write_text("KEY1=value1\nKEY2=value2\n")

        result = self._load_from(tmp_path)
        assert result.get("KEY1") == "value1"
        assert result.get("KEY2") == "value2"

    def test_load_dotenv_with_quotes(self, tmp_path: Path) -> None:
        """Test loading .env file with quoted values."""
        (tmp_path / ".env").write_text("KEY1=\"double quoted\"\nKEY2='single quoted'\n")

        result = self._load_from(tmp_path)
        assert result.get("KEY1") == "double quoted"
        assert result.get("KEY2") == "single quoted"

    def test_load_dotenv_skips_comments(self, tmp_path: Path) -> None:
        """Test that comments and blank lines are skipped in .env file."""
        (tmp_path / ".env").write_text("# This is a comment\n\nKEY1=value1\n# Another comment\n")

        result = self._load_from(tmp_path)
        assert result == {"KEY1": "value1"}

    def test_load_dotenv_export_prefix(self, tmp_path: Path) -> None:
        """Test that a leading export keyword is ignored."""
        (tmp_path / ".env").write_text("export KEY1=value1\n")

        assert self._load_from(tmp_path) == {"KEY1": "value1"}

    def test_load_dotenv_from_parent(self, tmp_path: Path) -> None:
        """Test that the nearest parent .env is used."""
        (tmp_path / ".env").write_text("KEY1=parent\n")
        child = tmp_path / "child"
        child.mkdir()

        assert self._load_from(child) == {"KEY1": "parent"}


class TestAtlassianCredentials:
    """Tests for AtlassianCredentials namedtuple."""

    def test_create_credentials(self) -> None:
        """Test creating AtlassianCredentials."""
        creds = AtlassianCredentials(
            site="https://test.atlassian.net",
            email="test@example.com",
            api_token="test-token",
        )
        assert creds.site == "https://test.atlassian.net"
        assert creds.email == "test@example.com"
        assert creds.api_token == "test-token"

    def test_unpacking(self) -> None:
        """Test that credentials unpack as a tuple."""
        site, email, token = AtlassianCredentials("https://x", "e", "t")
        assert (site, email, token) == ("https://x", "e", "t")

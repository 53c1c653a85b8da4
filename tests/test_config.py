"""
Tests for master password configuration.
"""
import pytest
from pydantic import ValidationError

from password_crypto import (
    ENV_VAR_NAME,
    ConfigurationError,
    CryptoConfig,
    generate_master_password,
    is_master_password_configured,
)
from password_crypto.config import get_master_password


class TestMasterPasswordSource:
    """Tests for reading MASTER_BONITA_PWD."""

    def test_env_var_name(self):
        assert ENV_VAR_NAME == "MASTER_BONITA_PWD"

    def test_not_configured_when_unset(self, monkeypatch):
        """Test an unset variable is not configured."""
        monkeypatch.delenv(ENV_VAR_NAME, raising=False)
        assert is_master_password_configured() is False

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_not_configured_when_blank(self, monkeypatch, value):
        """Test empty and whitespace values are not configured."""
        monkeypatch.setenv(ENV_VAR_NAME, value)
        assert is_master_password_configured() is False

    def test_configured(self, monkeypatch):
        """Test a real value is configured and returned as is."""
        monkeypatch.setenv(ENV_VAR_NAME, " secret ")
        assert is_master_password_configured() is True
        assert get_master_password() == " secret "

    def test_get_master_password_missing(self, monkeypatch):
        """Test the error names the environment variable."""
        monkeypatch.delenv(ENV_VAR_NAME, raising=False)
        with pytest.raises(ConfigurationError, match=ENV_VAR_NAME):
            get_master_password()


class TestCryptoConfig:
    """Tests for CryptoConfig validation."""

    def test_valid(self):
        config = CryptoConfig(master_password="master")
        assert config.master_password.get_secret_value() == "master"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_rejected(self, value):
        """Test blank master passwords fail validation."""
        with pytest.raises(ValidationError):
            CryptoConfig(master_password=value)

    def test_secret_hidden(self):
        """Test the master password does not appear in repr or str."""
        config = CryptoConfig(master_password="super-secret")
        assert "super-secret" not in repr(config)
        assert "super-secret" not in str(config)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR_NAME, "from-env")
        config = CryptoConfig.from_env()
        assert config.master_password.get_secret_value() == "from-env"

    def test_from_env_missing(self, monkeypatch):
        monkeypatch.delenv(ENV_VAR_NAME, raising=False)
        with pytest.raises(ConfigurationError):
            CryptoConfig.from_env()

    def test_generate_master_password(self):
        """Test generated master passwords are random and usable."""
        first = generate_master_password()
        assert len(first) >= 32
        assert first != generate_master_password()
        assert isinstance(CryptoConfig(master_password=first), CryptoConfig)

"""
Password Crypto Configuration — master password loading and validated settings.

Reads the master password from the environment variable:
    MASTER_BONITA_PWD = <opaque master password>

An unset variable and a blank one are both treated as "not configured".

Security Note:
    Never log the master password. Only log whether it is configured.
"""
import os
import secrets
import logging

from pydantic import BaseModel, SecretStr, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger("password_crypto")

ENV_VAR_NAME = "MASTER_BONITA_PWD"


def is_master_password_configured() -> bool:
    """Check if the MASTER_BONITA_PWD environment variable is set and not blank."""
    value = os.environ.get(ENV_VAR_NAME)
    return value is not None and bool(value.strip())


def get_master_password() -> str:
    """Read the master password from the MASTER_BONITA_PWD env var.

    Returns:
        The configured master password.

    Raises:
        ConfigurationError: If MASTER_BONITA_PWD is unset or blank.
    """
    value = os.environ.get(ENV_VAR_NAME)
    if value is None or not value.strip():
        raise ConfigurationError(
            f"Master password not configured. Set environment variable: {ENV_VAR_NAME}"
        )
    return value


def generate_master_password() -> str:
    """Generate a random master password suitable for MASTER_BONITA_PWD.

    This is a utility for operators to provision a new secret.

    Returns:
        URL-safe random string carrying 256 bits of entropy.
    """
    return secrets.token_urlsafe(32)


class CryptoConfig(BaseModel):
    """Validated crypto configuration."""

    master_password: SecretStr

    model_config = {"frozen": True}

    @field_validator("master_password")
    @classmethod
    def validate_not_blank(cls, v: SecretStr) -> SecretStr:
        """Reject empty or whitespace-only master passwords."""
        if not v.get_secret_value().strip():
            raise ValueError("master_password cannot be blank")
        return v

    @classmethod
    def from_env(cls) -> "CryptoConfig":
        """Create CryptoConfig by loading the master password from environment.

        Returns:
            Populated CryptoConfig instance.

        Raises:
            ConfigurationError: If MASTER_BONITA_PWD is unset or blank.
        """
        config = cls(master_password=get_master_password())
        logger.debug("Loaded master password from %s", ENV_VAR_NAME)
        return config

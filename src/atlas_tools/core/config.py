"""
Configuration management for atlas-tools.

Handles loading configuration from environment variables, .env files,
and CLI arguments with proper precedence.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from atlas_tools.constants import AtlasAPIConfig

# =============================================================================
# Atlas API Credentials
# =============================================================================


class AtlasCredentials(BaseModel):
    """
    Atlas programmatic API key pair.

    Attributes:
        public_key: API public key (used as the digest username)
        private_key: API private key (stored securely)
        base_url: API root the key pair is used against
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    public_key: Annotated[str, Field(min_length=1, description="API public key")]
    private_key: SecretStr = Field(description="API private key")
    base_url: str = Field(default=AtlasAPIConfig.DEFAULT_BASE_URL, description="API root URL")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Relative resource paths resolve against a base URL ending in '/'."""
        return v if v.endswith("/") else v + "/"


# =============================================================================
# Main Settings
# =============================================================================


class AtlasToolsSettings(BaseSettings):
    """
    Main settings for atlas-tools, loaded from environment and .env files.

    Environment variables (prefix ATLAS_):
        ATLAS_PUBLIC_KEY, ATLAS_PRIVATE_KEY, ATLAS_BASE_URL
        ATLAS_PROJECT_ID, ATLAS_API_TIMEOUT
        ATLAS_DEBUG, ATLAS_LOG_LEVEL, ATLAS_CONFIG_DIR
    """

    model_config = SettingsConfigDict(
        env_prefix="ATLAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Atlas API credentials
    public_key: str = ""
    private_key: SecretStr = SecretStr("")
    base_url: str = AtlasAPIConfig.DEFAULT_BASE_URL
    api_timeout: Annotated[int, Field(default=AtlasAPIConfig.DEFAULT_TIMEOUT, ge=1, le=300)]

    # Default project for CLI commands
    project_id: str = ""

    # Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "atlas-tools")

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    @property
    def credentials(self) -> AtlasCredentials | None:
        """Get Atlas credentials if both keys are set."""
        if self.public_key and self.private_key.get_secret_value():
            return AtlasCredentials(
                public_key=self.public_key,
                private_key=self.private_key,
                base_url=self.base_url,
            )
        return None

    @property
    def has_credentials(self) -> bool:
        """Check if credentials are configured."""
        return self.credentials is not None

    def ensure_dirs(self) -> None:
        """Create the config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: AtlasToolsSettings | None = None


def get_settings() -> AtlasToolsSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = AtlasToolsSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None

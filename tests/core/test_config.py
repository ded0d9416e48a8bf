"""
Tests for configuration loading.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import SecretStr, ValidationError

from atlas_tools.core.config import AtlasCredentials, AtlasToolsSettings, get_settings, reset_settings

ENV_VARS = (
    "ATLAS_PUBLIC_KEY",
    "ATLAS_PRIVATE_KEY",
    "ATLAS_BASE_URL",
    "ATLAS_PROJECT_ID",
    "ATLAS_API_TIMEOUT",
    "ATLAS_DEBUG",
    "ATLAS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate settings from the caller's environment and .env files."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


class TestAtlasCredentials:
    """Tests for AtlasCredentials."""

    def test_base_url_gets_trailing_slash(self) -> None:
        creds = AtlasCredentials(
            public_key="pub", private_key=SecretStr("priv"), base_url="https://atlas.example.com/api"
        )

        assert creds.base_url == "https://atlas.example.com/api/"

    def test_default_base_url(self) -> None:
        creds = AtlasCredentials(public_key="pub", private_key=SecretStr("priv"))

        assert creds.base_url == "https://cloud.mongodb.com/api/atlas/v1.0/"

    def test_public_key_required(self) -> None:
        with pytest.raises(ValidationError):
            AtlasCredentials(public_key="", private_key=SecretStr("priv"))

    def test_private_key_hidden(self) -> None:
        creds = AtlasCredentials(public_key="pub", private_key=SecretStr("priv"))

        assert "priv" not in repr(creds)


class TestAtlasToolsSettings:
    """Tests for environment-driven settings."""

    def test_no_credentials_by_default(self) -> None:
        settings = AtlasToolsSettings()

        assert settings.credentials is None
        assert settings.has_credentials is False

    def test_credentials_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLAS_PUBLIC_KEY", "pub")
        monkeypatch.setenv("ATLAS_PRIVATE_KEY", "priv")
        monkeypatch.setenv("ATLAS_PROJECT_ID", "p1")

        settings = AtlasToolsSettings()

        assert settings.has_credentials is True
        assert settings.credentials is not None
        assert settings.credentials.public_key == "pub"
        assert settings.credentials.private_key.get_secret_value() == "priv"
        assert settings.project_id == "p1"

    def test_credentials_need_both_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLAS_PUBLIC_KEY", "pub")

        assert AtlasToolsSettings().credentials is None

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLAS_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            AtlasToolsSettings()

    def test_reads_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("ATLAS_PUBLIC_KEY=from-file\nATLAS_PRIVATE_KEY=secret\n")

        settings = AtlasToolsSettings()

        assert settings.public_key == "from-file"

    def test_ensure_dirs(self, tmp_path: Path) -> None:
        settings = AtlasToolsSettings(config_dir=tmp_path / "cfg")

        settings.ensure_dirs()

        assert (tmp_path / "cfg").is_dir()


class TestSettingsCache:
    """Tests for get_settings()/reset_settings()."""

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("ATLAS_PROJECT_ID", "p2")

        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.project_id == "p2"

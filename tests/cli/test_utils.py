"""
Tests for CLI helper and output utilities.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from atlas_tools.cli.utils import get_client, load_json_file, mask_value, parse_assignments, resolve_project
from atlas_tools.core.exceptions import MissingCredentialsError


class TestParseAssignments:
    """Tests for parse_assignments."""

    def test_parses_pairs(self) -> None:
        assert parse_assignments(["apiToken=abc", "channel_name=alerts"]) == {
            "apiToken": "abc",
            "channel_name": "alerts",
        }

    def test_value_may_contain_equals(self) -> None:
        assert parse_assignments(["url=https://x/?a=b"]) == {"url": "https://x/?a=b"}

    def test_none(self) -> None:
        assert parse_assignments(None) == {}

    def test_missing_separator(self) -> None:
        with pytest.raises(typer.Exit):
            parse_assignments(["apiToken"])

    def test_empty_key(self) -> None:
        with pytest.raises(typer.Exit):
            parse_assignments(["=value"])


class TestLoadJsonFile:
    """Tests for load_json_file."""

    def test_loads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text('{"apiKey": "k"}')

        assert load_json_file(path) == {"apiKey": "k"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(typer.Exit):
            load_json_file(tmp_path / "missing.json")

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("[1, 2]")

        with pytest.raises(typer.Exit):
            load_json_file(path)


class TestResolveProject:
    """Tests for resolve_project."""

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLAS_PROJECT_ID", "env")

        assert resolve_project("given") == "given"

    def test_missing(self) -> None:
        with pytest.raises(typer.Exit):
            resolve_project(None)


class TestMaskValue:
    """Tests for mask_value."""

    def test_masks_long_secret(self) -> None:
        assert mask_value("apiKey", "abcd12345678") == "****5678"

    def test_masks_short_secret_fully(self) -> None:
        assert mask_value("secret", "short") == "****"

    def test_plain_field(self) -> None:
        assert mask_value("channelName", "alerts") == "alerts"

    def test_unset(self) -> None:
        assert mask_value("apiKey", None) == "N/A"


class TestGetClient:
    """Tests for get_client."""

    def test_missing_both_keys(self) -> None:
        with pytest.raises(MissingCredentialsError) as exc_info:
            get_client()

        assert exc_info.value.context["missing_fields"] == ["ATLAS_PUBLIC_KEY", "ATLAS_PRIVATE_KEY"]

    def test_builds_client_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLAS_PUBLIC_KEY", "pub")
        monkeypatch.setenv("ATLAS_PRIVATE_KEY", "priv")

        client = get_client()

        assert client.public_key == "pub"

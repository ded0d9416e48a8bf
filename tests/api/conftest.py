"""
Pytest fixtures for API client tests.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from pydantic import SecretStr

from atlas_tools.api.client import AtlasClient
from atlas_tools.core.config import AtlasCredentials


@pytest.fixture
def credentials() -> AtlasCredentials:
    """Create test credentials."""
    return AtlasCredentials(
        public_key="test_public_key",
        private_key=SecretStr("test_private_key"),
    )


@pytest.fixture
def mock_session() -> requests.Session:
    """Create a requests.Session whose transport is mocked."""
    session = requests.Session()
    session.send = MagicMock()  # type: ignore[method-assign]
    return session


@pytest.fixture
def client(credentials: AtlasCredentials, mock_session: requests.Session) -> AtlasClient:
    """Create an AtlasClient with mocked session."""
    client = AtlasClient.from_credentials(credentials)
    client._session = mock_session
    return client


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text or (json.dumps(json_data) if json_data is not None else "")
    response.content = response.text.encode()
    response.headers = headers or {}
    response.url = "https://cloud.mongodb.com/api/atlas/v1.0/groups/p1/integrations"

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON")

    return response

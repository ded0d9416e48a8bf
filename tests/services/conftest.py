"""
Pytest fixtures for service tests.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from atlas_tools.api.response import Response


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock API client."""
    return MagicMock()


def make_api_response(data: Any = None, status_code: int = 200) -> Response:
    """Helper to build the metadata the client returns from do()."""
    return Response(
        status_code=status_code,
        url="https://cloud.mongodb.com/api/atlas/v1.0/groups/p1/integrations",
        data=data,
    )

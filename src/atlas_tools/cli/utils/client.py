"""
Client utilities for CLI commands.

Provides authenticated API client access with consistent error handling.
"""

from __future__ import annotations

from atlas_tools.api.client import AtlasClient
from atlas_tools.core.config import get_settings
from atlas_tools.core.exceptions import MissingCredentialsError


def get_client() -> AtlasClient:
    """Get authenticated Atlas API client.

    Returns:
        Configured AtlasClient instance

    Raises:
        MissingCredentialsError: If either API key is not configured
    """
    settings = get_settings()

    if not settings.has_credentials:
        missing = []
        if not settings.public_key:
            missing.append("ATLAS_PUBLIC_KEY")
        if not settings.private_key.get_secret_value():
            missing.append("ATLAS_PRIVATE_KEY")
        raise MissingCredentialsError(missing)

    return AtlasClient.from_credentials(settings.credentials, timeout=settings.api_timeout)  # type: ignore

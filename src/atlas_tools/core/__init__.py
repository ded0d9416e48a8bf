"""
Core module for atlas-tools.

Contains configuration management and the exception hierarchy.
"""

from __future__ import annotations

from atlas_tools.core.config import (
    AtlasCredentials,
    AtlasToolsSettings,
    get_settings,
)
from atlas_tools.core.exceptions import (
    APIError,
    ArgumentError,
    AtlasToolsError,
    AuthenticationError,
    ConfigurationError,
)

__all__ = [
    # Settings
    "get_settings",
    "AtlasToolsSettings",
    "AtlasCredentials",
    # Exceptions
    "AtlasToolsError",
    "ArgumentError",
    "AuthenticationError",
    "APIError",
    "ConfigurationError",
]

"""
Constants and API endpoints for atlas-tools.

This module provides centralized configuration for:
- Atlas Administration API defaults
- Resource path templates
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Atlas API Configuration
# =============================================================================


class AtlasAPIConfig:
    """Atlas Administration API configuration constants."""

    DEFAULT_BASE_URL: Final[str] = "https://cloud.mongodb.com/api/atlas/v1.0/"
    MEDIA_TYPE: Final[str] = "application/json"
    USER_AGENT: Final[str] = "atlas-tools"

    DEFAULT_TIMEOUT: Final[int] = 30

    RETRY_AFTER_HEADER: Final[str] = "Retry-After"


class AtlasEndpoints:
    """Atlas API resource paths, relative to the API root."""

    # Third-party integrations; item paths append "/{integration_type}"
    INTEGRATIONS: Final[str] = "groups/{project_id}/integrations"


# Hypermedia link relations used by paginated responses
LINK_REL_SELF: Final[str] = "self"
LINK_REL_NEXT: Final[str] = "next"

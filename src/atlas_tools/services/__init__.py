"""
Service modules for atlas-tools.

Contains resource services built on top of the API client.
"""

from __future__ import annotations

from atlas_tools.services.base import APIClient, BaseService
from atlas_tools.services.integrations import IntegrationsService, integrations_service

__all__ = [
    # Base
    "APIClient",
    "BaseService",
    # Integrations
    "IntegrationsService",
    "integrations_service",
]

"""
Atlas Administration API access.

Contains the HTTP client and the response metadata it returns.
"""

from __future__ import annotations

from atlas_tools.api.client import AtlasClient
from atlas_tools.api.response import Response

__all__ = ["AtlasClient", "Response"]

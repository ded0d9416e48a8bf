"""
CLI command modules for atlas-tools.
"""

from __future__ import annotations

from atlas_tools.cli.commands import config, integration

__all__ = [
    "config",
    "integration",
]

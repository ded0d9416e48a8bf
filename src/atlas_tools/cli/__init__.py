"""
CLI module for atlas-tools.

Provides the `atlas` command-line interface.
"""

from __future__ import annotations

from atlas_tools.cli.main import app, cli

__all__ = ["app", "cli"]

"""
CLI utility modules for shared functionality.

Provides common utilities used across CLI commands:
- client: Authentication and API client access
- helpers: JSON loading and key=value parsing
- output: Secret masking and table creation
"""

from atlas_tools.cli.utils.client import get_client
from atlas_tools.cli.utils.helpers import load_json_file, parse_assignments, resolve_project
from atlas_tools.cli.utils.output import config_table, integrations_table, mask_value

__all__ = [
    # Client
    "get_client",
    # Helpers
    "load_json_file",
    "parse_assignments",
    "resolve_project",
    # Output
    "config_table",
    "integrations_table",
    "mask_value",
]

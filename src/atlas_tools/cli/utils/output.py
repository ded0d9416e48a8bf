"""
Output utilities for CLI commands.

Provides table builders for integration configurations with
sensitive values masked.
"""

from __future__ import annotations

from rich.table import Table

from atlas_tools.models.integrations import IntegrationConfig, IntegrationListResult

SENSITIVE_MARKERS = ("key", "token", "secret")


def mask_value(field: str, value: str | None) -> str:
    """Mask credentials so they are not echoed to the terminal.

    Example:
        >>> mask_value("apiKey", "abcd1234")
        '****1234'
    """
    if not value:
        return "N/A"
    if not any(marker in field.lower() for marker in SENSITIVE_MARKERS):
        return value
    return "****" + value[-4:] if len(value) > 8 else "****"


def config_table(config: IntegrationConfig, show_secrets: bool = False) -> Table:
    """Two-column table of the set fields of one configuration."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field, value in config.to_payload().items():
        if field == "type":
            continue
        table.add_row(field, value if show_secrets else mask_value(field, value))
    return table


def integrations_table(result: IntegrationListResult) -> Table:
    """Table summarizing each configured integration."""
    table = Table(title=f"Integrations ({result.total_count})")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Fields")

    for config in result.results:
        fields = [name for name in config.to_payload() if name != "type"]
        table.add_row(config.type or "N/A", ", ".join(fields) or "[dim]none[/dim]")
    return table

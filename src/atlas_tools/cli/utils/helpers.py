"""
Helper utilities for CLI commands.

Provides common functionality for file loading, option parsing,
and default project resolution.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from atlas_tools.core.config import get_settings

# Default console for error output
_console = Console()


def load_json_file(path: str | Path, console: Console | None = None) -> dict[str, Any]:
    """Load and parse a JSON object from a file with error handling.

    Args:
        path: Path to JSON file
        console: Console for error output (uses default if None)

    Returns:
        Parsed JSON object

    Raises:
        typer.Exit: If file not found, invalid JSON, or not an object
    """
    console = console or _console
    file_path = Path(path)

    if not file_path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]")
        raise typer.Exit(1) from None

    if not isinstance(data, dict):
        console.print("[red]Expected a JSON object[/red]")
        raise typer.Exit(1)
    return data


def parse_assignments(assignments: list[str] | None, console: Console | None = None) -> dict[str, str]:
    """Parse repeated KEY=VALUE options into a dictionary.

    Example:
        >>> parse_assignments(["apiToken=abc", "channel_name=alerts"])
        {'apiToken': 'abc', 'channel_name': 'alerts'}

    Raises:
        typer.Exit: If an assignment has no '=' or an empty key
    """
    console = console or _console
    result: dict[str, str] = {}
    for item in assignments or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            console.print(f"[red]Invalid assignment '{item}', expected KEY=VALUE[/red]")
            raise typer.Exit(1)
        result[key] = value
    return result


def resolve_project(project_id: str | None, console: Console | None = None) -> str:
    """Return the given project ID or the configured default.

    Raises:
        typer.Exit: If neither is set
    """
    console = console or _console
    project = project_id or get_settings().project_id
    if not project:
        console.print("[red]Error: no project given[/red]")
        console.print("Pass --project or set ATLAS_PROJECT_ID")
        raise typer.Exit(1)
    return project

"""
Configuration management commands.

Provides commands for viewing and managing atlas-tools configuration.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from atlas_tools.cli.utils import get_client
from atlas_tools.core.config import get_settings, reset_settings
from atlas_tools.core.exceptions import AtlasToolsError

app = typer.Typer(help="Manage atlas-tools configuration")
console = Console()


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = get_settings()

    # General settings
    console.print("\n[bold cyan]General Settings[/bold cyan]")
    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Config directory", str(settings.config_dir))
    table.add_row("Debug mode", str(settings.debug))
    table.add_row("Log level", settings.log_level)
    table.add_row("Default project", settings.project_id or "[dim]Not set[/dim]")
    console.print(table)

    # Atlas settings
    console.print("\n[bold cyan]Atlas API[/bold cyan]")
    api_table = Table(show_header=False, box=None)
    api_table.add_column("Setting", style="dim")
    api_table.add_column("Value")

    api_table.add_row("Base URL", settings.base_url)
    api_table.add_row("Public Key", settings.public_key or "[dim]Not set[/dim]")
    api_table.add_row(
        "Private Key", "[dim]****[/dim]" if settings.private_key.get_secret_value() else "[dim]Not set[/dim]"
    )
    api_table.add_row("API Timeout", f"{settings.api_timeout}s")
    console.print(api_table)

    # Status
    console.print()
    if settings.has_credentials:
        console.print("[green]✓ Atlas API keys configured[/green]")
    else:
        console.print("[yellow]⚠ Atlas API keys not configured[/yellow]")
        console.print("\nSet these environment variables:")
        console.print("  export ATLAS_PUBLIC_KEY=your-public-key")
        console.print("  export ATLAS_PRIVATE_KEY=your-private-key")


@app.command("init")
def init_config(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing example file"),
    ] = False,
) -> None:
    """Initialize the configuration directory."""
    settings = get_settings()

    settings.ensure_dirs()
    console.print(f"[green]✓[/green] Created config directory: {settings.config_dir}")

    env_example = settings.config_dir / ".env.example"
    if not env_example.exists() or force:
        env_content = """# Atlas programmatic API key
ATLAS_PUBLIC_KEY=your-public-key
ATLAS_PRIVATE_KEY=your-private-key

# Optional settings
ATLAS_PROJECT_ID=
ATLAS_API_TIMEOUT=30
ATLAS_DEBUG=false
ATLAS_LOG_LEVEL=INFO
"""
        env_example.write_text(env_content)
        console.print(f"[green]✓[/green] Created example env file: {env_example}")

    console.print("\n[bold]Next steps:[/bold]")
    console.print(f"1. Copy {env_example} to .env in your project")
    console.print("2. Fill in your Atlas API keys")
    console.print("3. Run 'atlas config show' to verify")


@app.command("test")
def test_connection() -> None:
    """Test Atlas API connection."""
    settings = get_settings()
    console.print(f"Testing connection to {settings.base_url}...")

    try:
        response = get_client().request("GET", "groups")
    except AtlasToolsError as e:
        console.print(f"[red]✗ Connection failed: {e}[/red]")
        raise typer.Exit(1)

    console.print("[green]✓ Connected successfully![/green]")
    console.print(f"  HTTP {response.status_code}")


@app.command("reset")
def reset_config_cache() -> None:
    """Reset cached configuration (reload from environment)."""
    reset_settings()
    console.print("[green]✓ Configuration cache reset[/green]")
    console.print("Run 'atlas config show' to see current configuration")

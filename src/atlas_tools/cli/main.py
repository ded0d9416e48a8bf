"""
Main CLI entry point for atlas-tools.

Provides the `atlas` command with subcommands for:
- config: Configuration management
- integration: Third-party integration management
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from atlas_tools import __version__
from atlas_tools.cli.commands import config, integration
from atlas_tools.core.config import get_settings

# Main CLI app
app = typer.Typer(
    name="atlas",
    help="MongoDB Atlas Tools - manage project integrations from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Rich console for formatted output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"atlas version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="ATLAS_DEBUG",
            help="Enable debug output",
        ),
    ] = False,
) -> None:
    """
    Atlas Tools.

    A CLI for MongoDB Atlas third-party integrations
    (PagerDuty, Slack, Datadog, webhooks, ...).
    """
    settings = get_settings()
    if debug:
        settings.debug = True

    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=settings.debug, rich_tracebacks=True)],
    )


# Register command groups
app.add_typer(config.app, name="config", help="Manage atlas-tools configuration")
app.add_typer(integration.app, name="integration", help="Manage third-party integrations")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]atlas[/bold] version {__version__}")
    console.print("MongoDB Atlas Tools")


@app.command()
def info() -> None:
    """Show configuration and environment info."""
    settings = get_settings()

    console.print("\n[bold]Configuration:[/bold]")
    console.print(f"  Config directory: {settings.config_dir}")
    console.print(f"  Debug mode: {settings.debug}")
    console.print(f"  Log level: {settings.log_level}")

    console.print("\n[bold]Atlas API:[/bold]")
    console.print(f"  Base URL: {settings.base_url}")
    if settings.has_credentials:
        console.print(f"  Public Key: {settings.public_key}")
        console.print(f"  API Timeout: {settings.api_timeout}s")
    else:
        console.print("  [yellow]API keys not configured[/yellow]")
        console.print("  Set ATLAS_PUBLIC_KEY and ATLAS_PRIVATE_KEY environment variables")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()

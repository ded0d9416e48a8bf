"""
Integration management commands.

Provides commands for managing a project's third-party integrations
(PagerDuty, Slack, Datadog, etc).
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from atlas_tools.cli.utils import (
    config_table,
    get_client,
    integrations_table,
    load_json_file,
    parse_assignments,
    resolve_project,
)
from atlas_tools.core.exceptions import AtlasToolsError
from atlas_tools.models.integrations import VARIANTS, IntegrationConfig
from atlas_tools.services.integrations import IntegrationsService

app = typer.Typer(help="Manage third-party integrations")
console = Console()

ProjectOption = Annotated[
    Optional[str],
    typer.Option("--project", "-p", help="Project ID (defaults to ATLAS_PROJECT_ID)"),
]


def _get_service() -> IntegrationsService:
    """Get integrations service."""
    return IntegrationsService(get_client())


def _build_config(integration_type: str, file: str | None, values: list[str] | None) -> IntegrationConfig:
    """Merge a JSON file and KEY=VALUE options into a configuration."""
    data: dict[str, Any] = load_json_file(file, console) if file else {}
    data.update(parse_assignments(values, console))

    # Decoding drops unknown keys silently
    fields = IntegrationConfig.model_fields
    known = set(fields) | {info.alias for info in fields.values() if info.alias}
    unknown = sorted(set(data) - known)
    if unknown:
        console.print(f"[red]Unknown config field(s): {', '.join(unknown)}[/red]")
        console.print("Run 'atlas integration types' to see the fields for each type")
        raise typer.Exit(1)

    data["type"] = integration_type.upper()
    try:
        return IntegrationConfig.model_validate(data)
    except ValidationError as e:
        console.print(f"[red]Invalid integration config: {e}[/red]")
        raise typer.Exit(1) from None


@app.command("list")
def list_integrations(
    project: ProjectOption = None,
    format: Annotated[str, typer.Option("--format", help="Output format: table, json, types")] = "table",
) -> None:
    """List integrations configured for a project."""
    project_id = resolve_project(project, console)

    try:
        result, _ = _get_service().list(project_id)
    except AtlasToolsError as e:
        console.print(f"[red]Failed to list integrations: {e}[/red]")
        raise typer.Exit(1)

    if format == "json":
        console.print_json(data=result.model_dump(by_alias=True, exclude_none=True))
    elif format == "types":
        for config in result.results:
            console.print(config.type)
    else:
        if not result.results:
            console.print("[dim]No integrations configured[/dim]")
            return
        console.print(integrations_table(result))


@app.command("get")
def get_integration(
    integration_type: Annotated[str, typer.Argument(help="Integration type, e.g. SLACK")],
    project: ProjectOption = None,
    show_secrets: Annotated[bool, typer.Option("--show-secrets", help="Print keys and tokens unmasked")] = False,
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Get the configuration for one integration type."""
    project_id = resolve_project(project, console)

    try:
        config, _ = _get_service().get(project_id, integration_type.upper())
    except AtlasToolsError as e:
        console.print(f"[red]Failed to get integration: {e}[/red]")
        raise typer.Exit(1)

    if format == "json":
        console.print_json(data=config.to_payload())
        return

    console.print(f"\n[bold cyan]{config.type or integration_type.upper()}[/bold cyan] (project: {project_id})")
    console.print()
    console.print(config_table(config, show_secrets=show_secrets))


@app.command("types")
def list_integration_types() -> None:
    """Show known integration types and their fields."""
    table = Table(title="Integration Types")
    table.add_column("Type", style="cyan")
    table.add_column("Fields")

    for type_name, variant in VARIANTS.items():
        table.add_row(type_name, ", ".join(variant.model_fields))

    console.print(table)
    console.print("\n[dim]Set fields with --set KEY=VALUE on create/replace[/dim]")


# ============================================================================
# Write Operations
# ============================================================================


@app.command("create")
def create_integration(
    integration_type: Annotated[str, typer.Argument(help="Integration type, e.g. SLACK")],
    project: ProjectOption = None,
    values: Annotated[
        Optional[list[str]], typer.Option("--set", "-s", help="Config field as KEY=VALUE (repeatable)")
    ] = None,
    file: Annotated[Optional[str], typer.Option("--file", "-f", help="Config as JSON file")] = None,
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Add an integration configuration to a project."""
    project_id = resolve_project(project, console)
    config = _build_config(integration_type, file, values)

    try:
        result, _ = _get_service().create(project_id, integration_type.upper(), config)
    except AtlasToolsError as e:
        console.print(f"[red]Failed to create integration: {e}[/red]")
        raise typer.Exit(1)

    if format == "json":
        console.print_json(data=result.model_dump(by_alias=True, exclude_none=True))
    else:
        console.print(f"[green]Created {config.type} integration for project {project_id}[/green]")


@app.command("replace")
def replace_integration(
    integration_type: Annotated[str, typer.Argument(help="Integration type, e.g. SLACK")],
    project: ProjectOption = None,
    values: Annotated[
        Optional[list[str]], typer.Option("--set", "-s", help="Config field as KEY=VALUE (repeatable)")
    ] = None,
    file: Annotated[Optional[str], typer.Option("--file", "-f", help="Config as JSON file")] = None,
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Replace an integration configuration (creates it if absent)."""
    project_id = resolve_project(project, console)
    config = _build_config(integration_type, file, values)

    try:
        result, _ = _get_service().replace(project_id, integration_type.upper(), config)
    except AtlasToolsError as e:
        console.print(f"[red]Failed to replace integration: {e}[/red]")
        raise typer.Exit(1)

    if format == "json":
        console.print_json(data=result.model_dump(by_alias=True, exclude_none=True))
    else:
        console.print(f"[green]Replaced {config.type} integration for project {project_id}[/green]")


@app.command("delete")
def delete_integration(
    integration_type: Annotated[str, typer.Argument(help="Integration type, e.g. SLACK")],
    project: ProjectOption = None,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Remove an integration configuration from a project."""
    project_id = resolve_project(project, console)
    kind = integration_type.upper()

    if not force:
        confirm = typer.confirm(f"Delete {kind} integration from project {project_id}?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    try:
        _get_service().delete(project_id, kind)
    except AtlasToolsError as e:
        console.print(f"[red]Failed to delete integration: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Deleted {kind} integration[/green]")

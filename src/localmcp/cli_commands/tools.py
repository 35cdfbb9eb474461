"""``localmcp tools`` — inspect the registered tools."""

from __future__ import annotations

from pathlib import Path

import click

from localmcp.cli_commands._options import load_settings
from localmcp.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option(
    "--profile",
    type=click.Choice(["all", "notes", "tasks"]),
    default=None,
    help="Which tool set to list.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings YAML file.",
)
def list_tools(profile: str | None, as_json: bool, config_path: Path | None) -> None:
    """List the tools the server would expose."""
    from localmcp.server.builder import build_dispatcher

    settings = load_settings(config_path, memory=True, profile=profile)
    dispatcher = build_dispatcher(settings)
    descriptors = dispatcher.registry.descriptors()

    if not descriptors:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(descriptors, as_json=as_json)

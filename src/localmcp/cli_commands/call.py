"""``localmcp call`` — invoke one tool locally and print its text result."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from localmcp.cli_commands._options import load_settings, server_options
from localmcp.cli_commands._output import console
from localmcp.protocol.errors import ProtocolError


def _parse_arg(raw: str) -> tuple[str, Any]:
    """``key=value``; the value is read as JSON when it parses, else as a string."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        msg = f"expected key=value, got {raw!r}"
        raise click.BadParameter(msg, param_hint="--arg")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


@click.command()
@click.argument("tool")
@click.option("--arg", "-a", "args", multiple=True, help="Tool argument as key=value (repeatable).")
@server_options
def call(
    tool: str,
    args: tuple[str, ...],
    config_path: Path | None,
    data_dir: Path | None,
    memory: bool,
    profile: str | None,
    log_level: str | None,
) -> None:
    """Call TOOL once against the configured documents."""
    from localmcp.server.builder import build_dispatcher

    arguments = dict(_parse_arg(a) for a in args)
    settings = load_settings(
        config_path, data_dir=data_dir, memory=memory, profile=profile, log_level=log_level
    )
    dispatcher = build_dispatcher(settings)

    try:
        text = dispatcher.registry.invoke(tool, arguments)
    except ProtocolError as exc:
        console.print(f"[red]Call error:[/red] {exc}")
        sys.exit(1)

    console.print(text, markup=False, highlight=False, soft_wrap=True)

"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from localmcp.protocol.models import ToolDescriptor

console = Console()


def print_tools_table(tools: list[ToolDescriptor], *, as_json: bool = False) -> None:
    """Pretty-print tool descriptors as a table (or as the ``tools/list`` JSON)."""
    if as_json:
        console.print_json(json.dumps({"tools": [t.to_wire() for t in tools]}))
        return

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = tool.input_schema.get("required") or []
        table.add_row(tool.name, _truncate(tool.description), ", ".join(required) or "-")

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."

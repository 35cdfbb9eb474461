"""localmcp — a minimal MCP server with notes and task-list tools."""

from __future__ import annotations

__version__ = "0.1.0"

"""Logging setup — diagnostics always go to stderr.

Stdout belongs to the stdio transport, so the root logger is bound to a
stderr :class:`rich.console.Console`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

stderr_console = Console(stderr=True)


def configure_logging(level: str = "INFO") -> None:
    """Install a single :class:`RichHandler` on the root logger."""
    handler = RichHandler(
        console=stderr_console,
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

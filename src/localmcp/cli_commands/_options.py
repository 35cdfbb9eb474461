"""Options shared by the commands that build a server."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from localmcp.config import ConfigError, ServerSettings, SettingsLoader
from localmcp.utils.logs import stderr_console

F = TypeVar("F", bound=Callable[..., Any])


def server_options(func: F) -> F:
    """Attach ``--config``, ``--data-dir``, ``--memory``, ``--profile``, ``--log-level``."""
    options = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            default=None,
            help="Settings YAML file.",
        ),
        click.option(
            "--data-dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=None,
            help="Directory for task list, status, prompt and results documents.",
        ),
        click.option(
            "--memory",
            is_flag=True,
            default=False,
            help="Keep documents in memory instead of on disk.",
        ),
        click.option(
            "--profile",
            type=click.Choice(["all", "notes", "tasks"]),
            default=None,
            help="Which tool set to expose.",
        ),
        click.option(
            "--log-level",
            type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
            default=None,
            help="Logging level (default: INFO).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_settings(
    config_path: Path | None,
    *,
    data_dir: Path | None = None,
    memory: bool = False,
    profile: str | None = None,
    log_level: str | None = None,
    **overrides: Any,
) -> ServerSettings:
    """Load settings, applying CLI overrides; exits on configuration errors."""
    try:
        return SettingsLoader(config_path).load(
            data_dir=data_dir,
            persist=False if memory else None,
            tool_profile=profile,
            log_level=log_level,
            **overrides,
        )
    except ConfigError as exc:
        stderr_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

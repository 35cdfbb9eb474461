"""Settings loading — YAML file, environment, then explicit overrides."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from localmcp.config.errors import ConfigError
from localmcp.config.models import ServerSettings

if TYPE_CHECKING:
    from pathlib import Path


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ServerSettings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def load(self, **overrides: Any) -> ServerSettings:
        """Read YAML, interpolate env vars, apply overrides, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. ``PORT`` in the
        environment sets the HTTP port when the file does not. Overrides whose
        value is ``None`` are ignored; ``http_*`` overrides go to the nested
        ``http`` section.

        Raises:
            ConfigError: On read errors, YAML parse errors, or validation failures.
        """
        data = _read(self._path) if self._path is not None else {}

        http = dict(data.get("http") or {})
        port = os.environ.get("PORT")
        if port and "port" not in http:
            http["port"] = port

        for key, value in overrides.items():
            if value is None:
                continue
            if key.startswith("http_"):
                http[key.removeprefix("http_")] = value
            else:
                data[key] = value
        data["http"] = http

        try:
            return ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def _read(path: Path) -> dict[str, Any]:
    """Read *path* as YAML after expanding environment variables."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Settings YAML must be a mapping")
    return data

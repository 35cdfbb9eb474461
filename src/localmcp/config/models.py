"""Pydantic models for the server settings YAML consumed by ``localmcp serve``."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_DATA_DIR = Path("~/.claude-prompts")


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class HttpSettings(BaseModel):
    """Listener settings for the HTTP transport."""

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=0, le=65535)
    endpoint: str = "/mcp"
    certfile: Path | None = None
    keyfile: Path | None = None

    @field_validator("endpoint")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            value = "/" + value
        return value

    @property
    def tls(self) -> bool:
        return self.certfile is not None or self.keyfile is not None


class ServerSettings(BaseModel):
    """Top-level server settings."""

    name: str = "Local MCP Server"
    version: str = "1.0.0"
    protocol_version: str = "2024-11-05"
    data_dir: Path = DEFAULT_DATA_DIR
    persist: bool = True
    tool_profile: Literal["all", "notes", "tasks"] = "all"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    http: HttpSettings = Field(default_factory=HttpSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def resolved_data_dir(self) -> Path:
        return self.data_dir.expanduser()

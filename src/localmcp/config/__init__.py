"""Server configuration."""

from localmcp.config.errors import ConfigError
from localmcp.config.loader import SettingsLoader
from localmcp.config.models import HttpSettings, ServerSettings, TelemetrySettings

__all__ = [
    "ConfigError",
    "HttpSettings",
    "ServerSettings",
    "SettingsLoader",
    "TelemetrySettings",
]

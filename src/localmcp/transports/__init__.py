"""Transport adapters — stdio (JSON-RPC lines) and HTTP (JSON bodies)."""

from localmcp.transports.http import create_app, serve_http
from localmcp.transports.stdio import StdioServer, serve_stdio

__all__ = [
    "StdioServer",
    "create_app",
    "serve_http",
    "serve_stdio",
]

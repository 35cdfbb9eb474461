"""``localmcp serve`` — run the server over stdio or HTTP."""

from __future__ import annotations

from pathlib import Path

import click

from localmcp.cli_commands._options import load_settings, server_options
from localmcp.protocol.models import ResultFormat
from localmcp.utils.logs import configure_logging


@click.group()
def serve() -> None:
    """Run the MCP server."""


@serve.command("stdio")
@server_options
def stdio(
    config_path: Path | None,
    data_dir: Path | None,
    memory: bool,
    profile: str | None,
    log_level: str | None,
) -> None:
    """Serve JSON-RPC lines on stdin/stdout (for desktop MCP clients)."""
    from localmcp.server.builder import build_dispatcher
    from localmcp.transports.stdio import serve_stdio

    settings = load_settings(
        config_path, data_dir=data_dir, memory=memory, profile=profile, log_level=log_level
    )
    configure_logging(settings.log_level)

    dispatcher = build_dispatcher(settings, result_format=ResultFormat.CONTENT)
    serve_stdio(dispatcher)


@serve.command("http")
@server_options
@click.option("--host", default=None, help="Bind address (default: 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port (default: $PORT or 3000).")
@click.option("--endpoint", default=None, help="Path of the MCP endpoint (default: /mcp).")
@click.option(
    "--cert",
    "certfile",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TLS certificate; enables HTTPS together with --key.",
)
@click.option(
    "--key",
    "keyfile",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TLS private key.",
)
def http(
    config_path: Path | None,
    data_dir: Path | None,
    memory: bool,
    profile: str | None,
    log_level: str | None,
    host: str | None,
    port: int | None,
    endpoint: str | None,
    certfile: Path | None,
    keyfile: Path | None,
) -> None:
    """Serve JSON bodies on POST <endpoint>, plus GET /health."""
    from localmcp.server.builder import build_dispatcher
    from localmcp.transports.http import create_app, serve_http

    settings = load_settings(
        config_path,
        data_dir=data_dir,
        memory=memory,
        profile=profile,
        log_level=log_level,
        http_host=host,
        http_port=port,
        http_endpoint=endpoint,
        http_certfile=certfile,
        http_keyfile=keyfile,
    )
    configure_logging(settings.log_level)

    dispatcher = build_dispatcher(settings, result_format=ResultFormat.OUTPUT)
    app = create_app(dispatcher, endpoint=settings.http.endpoint)
    serve_http(
        app,
        host=settings.http.host,
        port=settings.http.port,
        endpoint=settings.http.endpoint,
        certfile=settings.http.certfile,
        keyfile=settings.http.keyfile,
        log_level=settings.log_level,
    )

"""HTTP transport — one JSON body per ``POST`` to the MCP endpoint.

Bodies are ``{method, params}`` with no correlation id; responses are
``{"result": ...}`` (200) or ``{"error": message}`` (400/500). ``GET /health``
reports liveness. Every response carries permissive CORS headers.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import uvicorn
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from localmcp.protocol import codec
from localmcp.protocol.errors import ProtocolError

if TYPE_CHECKING:
    from pathlib import Path

    from starlette.requests import Request

    from localmcp.server.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

CERT_INSTRUCTIONS = """\
TLS certificate or key not found.

Generate a self-signed pair with:

    openssl req -x509 -newkey rsa:2048 -nodes -days 365 \\
        -keyout {keyfile} -out {certfile} -subj "/CN=localhost"

then start the server again."""


def create_app(dispatcher: Dispatcher, endpoint: str = "/mcp") -> Starlette:
    """Build the Starlette application serving *dispatcher* at *endpoint*."""

    async def handle_mcp(request: Request) -> Response:
        body = await request.body()
        try:
            method, params = codec.decode_http_body(body)
        except ProtocolError as exc:
            logger.warning("Rejected request body: %s", exc)
            return JSONResponse({"error": str(exc)}, status_code=exc.status)

        logger.info("Received MCP request: %s", method)
        try:
            result = await run_in_threadpool(dispatcher.dispatch, method, params)
        except ProtocolError as exc:
            logger.info("MCP request %s failed: %s", method, exc)
            return JSONResponse({"error": str(exc)}, status_code=exc.status)
        except Exception:
            logger.exception("Error handling MCP request %s", method)
            return JSONResponse({"error": "Internal error"}, status_code=500)

        if result is None:
            return Response(status_code=202)
        return JSONResponse({"result": result})

    async def health_check(request: Request) -> Response:
        return JSONResponse({"status": "healthy", "timestamp": datetime.now(UTC).isoformat()})

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_headers=["Content-Type"],
            allow_methods=["GET", "POST", "OPTIONS"],
        ),
    ]
    routes = [
        Route(endpoint, handle_mcp, methods=["POST"]),
        Route("/health", health_check, methods=["GET"]),
    ]
    return Starlette(routes=routes, middleware=middleware)


def check_tls_files(certfile: Path | None, keyfile: Path | None) -> str | None:
    """Return instructions when a configured TLS file is missing, else ``None``."""
    if certfile is None and keyfile is None:
        return None
    missing = [p for p in (certfile, keyfile) if p is None or not p.is_file()]
    if not missing:
        return None
    return CERT_INSTRUCTIONS.format(
        certfile=certfile or "cert.pem",
        keyfile=keyfile or "key.pem",
    )


def serve_http(
    app: Starlette,
    *,
    host: str = "127.0.0.1",
    port: int = 3000,
    endpoint: str = "/mcp",
    certfile: Path | None = None,
    keyfile: Path | None = None,
    log_level: str = "info",
) -> None:
    """Run *app* under uvicorn; exits with instructions if TLS files are missing."""
    instructions = check_tls_files(certfile, keyfile)
    if instructions is not None:
        logger.error(instructions)
        sys.exit(1)

    scheme = "https" if certfile else "http"
    logger.info("MCP server listening on %s://%s:%s%s", scheme, host, port, endpoint)
    logger.info("Health check: %s://%s:%s/health", scheme, host, port)

    kwargs: dict[str, Any] = {}
    if certfile and keyfile:
        kwargs = {"ssl_certfile": str(certfile), "ssl_keyfile": str(keyfile)}
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower(), **kwargs)

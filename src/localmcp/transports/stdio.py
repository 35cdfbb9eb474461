"""Stdio transport — newline-delimited JSON-RPC over a pair of text streams.

One request per input line, one response per output line, nothing at all
for notifications. Diagnostics go through :mod:`logging` (stderr), never
to the output stream.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from localmcp.server.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class StdioServer:
    """Reads lines from *reader*, writes responses to *writer*."""

    def __init__(self, dispatcher: Dispatcher, reader: TextIO, writer: TextIO) -> None:
        self._dispatcher = dispatcher
        self._reader = reader
        self._writer = writer

    def process_line(self, line: str) -> str | None:
        """Handle one input line and return the response line, if any."""
        line = line.strip()
        if not line:
            return None
        try:
            return self._dispatcher.handle_raw(line)
        except Exception:
            # One bad line never stops the loop.
            logger.exception("Failed to process input line")
            return None

    def send(self, payload: str) -> None:
        self._writer.write(payload + "\n")
        self._writer.flush()

    def serve(self) -> int:
        """Serve until EOF; returns the number of responses written."""
        logger.info("MCP server started via stdio")
        written = 0
        for line in self._reader:
            response = self.process_line(line)
            if response is not None:
                self.send(response)
                written += 1
        logger.info("End of input stream, shutting down")
        return written


def serve_stdio(dispatcher: Dispatcher) -> None:
    """Run the dispatcher against the process's stdin/stdout."""
    try:
        StdioServer(dispatcher, sys.stdin, sys.stdout).serve()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")

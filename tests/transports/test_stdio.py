"""Tests for the stdio transport loop."""

from __future__ import annotations

import io
import json
from unittest.mock import patch

from localmcp.server.dispatcher import Dispatcher
from localmcp.transports.stdio import StdioServer


def _serve(dispatcher: Dispatcher, *lines: str) -> list[dict[str, object]]:
    reader = io.StringIO("".join(line + "\n" for line in lines))
    writer = io.StringIO()
    StdioServer(dispatcher, reader, writer).serve()
    return [json.loads(out) for out in writer.getvalue().splitlines()]


class TestStdioServer:
    def test_session(self, dispatcher: Dispatcher) -> None:
        out = _serve(
            dispatcher,
            '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{}}',
            '{"jsonrpc":"2.0","method":"notifications/initialized"}',
            '{"jsonrpc":"2.0","id":2,"method":"tools/list"}',
            '{"jsonrpc":"2.0","id":3,"method":"tools/call","params":{"name":"add_note","arguments":{"content":"buy milk"}}}',
            '{"jsonrpc":"2.0","id":4,"method":"tools/call","params":{"name":"get_notes"}}',
        )
        assert [o["id"] for o in out] == [1, 2, 3, 4]
        assert "buy milk" in out[3]["result"]["content"][0]["text"]

    def test_notification_emits_no_line(self, dispatcher: Dispatcher) -> None:
        assert _serve(dispatcher, '{"method":"notifications/initialized"}') == []

    def test_blank_lines_skipped(self, dispatcher: Dispatcher) -> None:
        out = _serve(dispatcher, "", "   ", '{"id":1,"method":"prompts/list"}')
        assert len(out) == 1

    def test_malformed_line_does_not_break_framing(self, dispatcher: Dispatcher) -> None:
        out = _serve(dispatcher, "{oops", '{"id":2,"method":"prompts/list"}')
        assert out[0]["error"]["code"] == -32700
        assert out[1] == {"jsonrpc": "2.0", "id": 2, "result": {"prompts": []}}

    def test_unexpected_failure_is_logged_not_written(self, dispatcher: Dispatcher) -> None:
        with patch.object(dispatcher, "handle_raw", side_effect=[RuntimeError("x"), '{"id":2}']):
            reader = io.StringIO("a\nb\n")
            writer = io.StringIO()
            written = StdioServer(dispatcher, reader, writer).serve()
        assert written == 1
        assert writer.getvalue() == '{"id":2}\n'

    def test_one_object_per_line(self, dispatcher: Dispatcher) -> None:
        reader = io.StringIO('{"id":1,"method":"tools/list"}\n{"id":2,"method":"tools/list"}\n')
        writer = io.StringIO()
        assert StdioServer(dispatcher, reader, writer).serve() == 2
        lines = writer.getvalue().split("\n")
        assert lines[-1] == ""
        assert len(lines) == 3

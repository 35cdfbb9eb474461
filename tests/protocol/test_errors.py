"""Tests for the protocol error taxonomy."""

import pytest

from localmcp.protocol.errors import (
    HandlerFaultError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    UnknownResourceError,
    UnknownToolError,
)


@pytest.mark.parametrize(
    ("error", "code", "status"),
    [
        (ParseError("bad"), -32700, 400),
        (InvalidRequestError("bad"), -32600, 400),
        (MethodNotFoundError("x"), -32601, 400),
        (UnknownToolError("x"), -32601, 400),
        (UnknownResourceError("x"), -32002, 400),
        (HandlerFaultError("x"), -32603, 500),
    ],
)
def test_codes_and_statuses(error: ProtocolError, code: int, status: int) -> None:
    assert isinstance(error, ProtocolError)
    assert error.code == code
    assert error.status == status


def test_messages() -> None:
    assert str(MethodNotFoundError("foo/bar")) == "Method not found: foo/bar"
    assert str(UnknownToolError("nope")) == "Unknown tool: nope"
    assert str(UnknownResourceError("r")) == "Unknown resource: r"
    assert str(HandlerFaultError("add_task")) == "Tool execution failed: add_task"
    assert str(ParseError()) == "Parse error"


def test_unknown_tool_keeps_name() -> None:
    err = UnknownToolError("ghost")
    assert err.name == "ghost"

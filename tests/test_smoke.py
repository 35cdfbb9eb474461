"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import localmcp

    assert localmcp.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from localmcp.cli import main

    assert callable(main)


def test_public_imports() -> None:
    from localmcp.protocol import Method, decode, encode
    from localmcp.server import Dispatcher, build_dispatcher
    from localmcp.store import StateStore
    from localmcp.tools import ToolRegistry, build_registry
    from localmcp.transports import StdioServer, create_app

    assert Dispatcher is not None
    assert build_dispatcher is not None
    assert StateStore is not None
    assert ToolRegistry is not None
    assert build_registry is not None
    assert StdioServer is not None
    assert create_app is not None
    assert Method.TOOLS_CALL.value == "tools/call"
    assert callable(decode)
    assert callable(encode)

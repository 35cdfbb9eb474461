"""Shared fixtures: a fresh store and dispatcher per test."""

from __future__ import annotations

import json
from typing import Any

import pytest

from localmcp.config.models import ServerSettings
from localmcp.protocol.models import ResultFormat
from localmcp.server.builder import build_dispatcher
from localmcp.server.dispatcher import Dispatcher
from localmcp.store.documents import InMemoryDocumentStore
from localmcp.store.state import StateStore


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    docs = InMemoryDocumentStore()
    docs.bootstrap()
    return docs


@pytest.fixture
def store(documents: InMemoryDocumentStore) -> StateStore:
    return StateStore(documents)


@pytest.fixture
def settings() -> ServerSettings:
    return ServerSettings(persist=False)


@pytest.fixture
def dispatcher(settings: ServerSettings, documents: InMemoryDocumentStore) -> Dispatcher:
    return build_dispatcher(settings, documents=documents)


@pytest.fixture
def http_dispatcher(settings: ServerSettings, documents: InMemoryDocumentStore) -> Dispatcher:
    return build_dispatcher(settings, result_format=ResultFormat.OUTPUT, documents=documents)


@pytest.fixture
def call_tool(dispatcher: Dispatcher) -> Any:
    """Send one ``tools/call`` through the raw line path and return the text result."""
    counter = {"id": 0}

    def _call(name: str, **arguments: Any) -> str:
        counter["id"] += 1
        line = json.dumps(
            {
                "jsonrpc": "2.0",
                "id": counter["id"],
                "method": "tools/call",
                "params": {"name": name, "arguments": arguments},
            }
        )
        raw = dispatcher.handle_raw(line)
        assert raw is not None
        response = json.loads(raw)
        assert "error" not in response, response
        return response["result"]["content"][0]["text"]

    return _call

"""Tests for the HTTP transport."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any
from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

if TYPE_CHECKING:
    from pathlib import Path

from localmcp.server.dispatcher import Dispatcher
from localmcp.transports.http import check_tls_files, create_app


@pytest.fixture
def client(http_dispatcher: Dispatcher) -> TestClient:
    return TestClient(create_app(http_dispatcher))


class TestMcpEndpoint:
    def test_initialize(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "initialize"})
        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["serverInfo"]["name"] == "Local MCP Server"
        assert isinstance(result["capabilities"]["tools"], list)

    def test_tool_call(self, client: TestClient) -> None:
        resp = client.post(
            "/mcp",
            json={"method": "tools/call", "params": {"name": "add_note", "arguments": {"content": "hi"}}},
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["output"].startswith("Note added with ID:")

        resp = client.post("/mcp", json={"method": "tools/call", "params": {"name": "get_notes"}})
        assert '"hi"' in resp.json()["result"]["output"]

    def test_unknown_tool_is_400(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "tools/call", "params": {"name": "nope"}})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Unknown tool: nope"}

    def test_unknown_method_is_400(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "bogus"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Method not found: bogus"}

    def test_unknown_resource_is_400(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "resources/read", "params": {"name": "x"}})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Unknown resource: x"}

    def test_resources_read(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "resources/read", "params": {"name": "local_data"}})
        assert resp.status_code == 200
        assert '"notes"' in resp.json()["result"]["content"]

    def test_malformed_body_is_400(self, client: TestClient) -> None:
        resp = client.post("/mcp", content=b"{nope", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert "Parse error" in resp.json()["error"]

    def test_handler_fault_is_500_without_trace(self, client: TestClient) -> None:
        resp = client.post(
            "/mcp",
            json={"method": "tools/call", "params": {"name": "create_project_plan", "arguments": {}}},
        )
        assert resp.status_code == 500
        assert resp.json() == {"error": "Tool execution failed: create_project_plan"}

    def test_unexpected_error_is_500(self, client: TestClient, http_dispatcher: Dispatcher) -> None:
        with patch.object(http_dispatcher, "dispatch", side_effect=RuntimeError("secret detail")):
            resp = client.post("/mcp", json={"method": "tools/list"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal error"}

    def test_dispatch_runs_off_the_event_loop(self, client: TestClient, http_dispatcher: Dispatcher) -> None:
        seen: list[bool] = []

        def dispatch(method: str, params: dict[str, Any]) -> dict[str, Any]:
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                seen.append(False)
            else:
                seen.append(True)
            return {"ok": True}

        with patch.object(http_dispatcher, "dispatch", side_effect=dispatch):
            resp = client.post("/mcp", json={"method": "tools/list"})
        assert resp.json() == {"result": {"ok": True}}
        assert seen == [False]

    def test_notification_method_accepted_without_body(self, client: TestClient) -> None:
        resp = client.post("/mcp", json={"method": "notifications/initialized"})
        assert resp.status_code == 202
        assert resp.content == b""

    def test_get_not_allowed(self, client: TestClient) -> None:
        assert client.get("/mcp").status_code == 405

    def test_custom_endpoint(self, http_dispatcher: Dispatcher) -> None:
        client = TestClient(create_app(http_dispatcher, endpoint="/rpc"))
        assert client.post("/rpc", json={"method": "prompts/list"}).json() == {"result": {"prompts": []}}
        assert client.post("/mcp", json={"method": "prompts/list"}).status_code == 404


class TestHealthAndCors:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert "timestamp" in body

    def test_cors_header_on_response(self, client: TestClient) -> None:
        resp = client.get("/health", headers={"Origin": "http://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_cors_preflight(self, client: TestClient) -> None:
        resp = client.options(
            "/mcp",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert resp.status_code == 200
        assert "POST" in resp.headers["access-control-allow-methods"]


class TestTlsCheck:
    def test_no_tls_configured(self) -> None:
        assert check_tls_files(None, None) is None

    def test_missing_files_give_instructions(self, tmp_path: Path) -> None:
        text = check_tls_files(tmp_path / "cert.pem", tmp_path / "key.pem")
        assert text is not None
        assert "openssl req" in text

    def test_present_files(self, tmp_path: Path) -> None:
        cert = tmp_path / "cert.pem"
        key = tmp_path / "key.pem"
        cert.write_text("c")
        key.write_text("k")
        assert check_tls_files(cert, key) is None

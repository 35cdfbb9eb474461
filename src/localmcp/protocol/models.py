"""Protocol models — JSON-RPC 2.0 envelopes and MCP descriptors.

Covers the message format served by :class:`~localmcp.server.dispatcher.Dispatcher`
for the handshake (``initialize``), tool discovery (``tools/list``) and tool
execution (``tools/call``), plus the auxiliary resource and prompt methods.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

RequestId = int | float | str

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request. Without an ``id`` it is a notification."""

    jsonrpc: str = "2.0"
    method: str
    id: RequestId | None = None
    params: dict[str, Any] = {}

    @field_validator("method")
    @classmethod
    def _method_not_empty(cls, value: str) -> str:
        if not value:
            msg = "method must be a non-empty string"
            raise ValueError(msg)
        return value

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response carrying exactly one of ``result`` or ``error``."""

    jsonrpc: str = "2.0"
    id: RequestId | None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    def to_wire(self) -> dict[str, Any]:
        """Return the wire dict, omitting whichever of result/error is unset."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# Method table
# ---------------------------------------------------------------------------


class Method(str, Enum):
    """Top-level methods understood by the dispatcher."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"
    PROMPTS_LIST = "prompts/list"
    INITIALIZED = "notifications/initialized"

    @classmethod
    def lookup(cls, name: str) -> Method | None:
        try:
            return cls(name)
        except ValueError:
            return None


class ResultFormat(str, Enum):
    """Shape of a ``tools/call`` result, chosen by the active transport.

    ``content`` is the MCP shape used over stdio; ``output`` is the flat
    shape served by the HTTP endpoint.
    """

    CONTENT = "content"
    OUTPUT = "output"


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ResourceDescriptor(BaseModel):
    """A resource definition as returned by ``resources/list``."""

    model_config = {"populate_by_name": True}

    name: str
    description: str = ""
    uri: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """The human/agent-readable output of a tool call."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(part.text for part in self.content)

    def to_wire(self, result_format: ResultFormat = ResultFormat.CONTENT) -> dict[str, Any]:
        """Render the result in the shape expected by the active transport."""
        if result_format is ResultFormat.OUTPUT:
            return {"output": self.text}
        return self.model_dump()

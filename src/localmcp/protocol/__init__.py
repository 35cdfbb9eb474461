"""Protocol layer — JSON-RPC envelopes, codec, and error taxonomy."""

from localmcp.protocol.codec import decode, decode_http_body, encode
from localmcp.protocol.errors import (
    HandlerFaultError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    RegistrationError,
    UnknownResourceError,
    UnknownToolError,
)
from localmcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    Method,
    ResourceDescriptor,
    ResultFormat,
    TextContent,
    ToolDescriptor,
    ToolResult,
)

__all__ = [
    "HandlerFaultError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "Method",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolError",
    "RegistrationError",
    "ResourceDescriptor",
    "ResultFormat",
    "TextContent",
    "ToolDescriptor",
    "ToolResult",
    "UnknownResourceError",
    "UnknownToolError",
    "decode",
    "decode_http_body",
    "encode",
]

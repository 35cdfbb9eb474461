"""Shared error types for the protocol layer.

Each wire-visible error carries its JSON-RPC ``code`` and the HTTP
``status`` used by the HTTP transport.
"""


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""

    code = -32603
    status = 500


class ParseError(ProtocolError):
    """The raw message unit is not well-formed JSON."""

    code = -32700
    status = 400

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Parse error" + (f": {detail}" if detail else ""))


class InvalidRequestError(ProtocolError):
    """Well-formed JSON that is not a valid request object."""

    code = -32600
    status = 400

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid request" + (f": {detail}" if detail else ""))


class MethodNotFoundError(ProtocolError):
    """Unrecognised top-level method."""

    code = -32601
    status = 400

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class UnknownToolError(ProtocolError):
    """Requested tool does not exist in the registry."""

    code = -32601
    status = 400

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class UnknownResourceError(ProtocolError):
    """Requested resource is not declared by the server."""

    code = -32002
    status = 400

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown resource: {name}")


class HandlerFaultError(ProtocolError):
    """A tool handler failed unexpectedly.

    The message stays generic; the underlying exception is kept on
    ``__cause__`` for server-side logging only.
    """

    code = -32603
    status = 500

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool execution failed: {name}")


class RegistrationError(Exception):
    """A tool could not be registered (bad descriptor or frozen registry)."""

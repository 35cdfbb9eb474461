"""Dispatcher — routes decoded requests to method handlers and builds envelopes.

Two entry points share the same routing table:

* :meth:`Dispatcher.dispatch` — ``(method, params) -> result``; raises
  :class:`~localmcp.protocol.errors.ProtocolError`. Used by the HTTP
  transport, whose bodies carry no correlation id.
* :meth:`Dispatcher.handle` / :meth:`Dispatcher.handle_raw` — JSON-RPC
  semantics: exactly one response per request carrying an ``id``, none for
  notifications, even when processing fails.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from localmcp.protocol import codec
from localmcp.protocol.errors import (
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
)
from localmcp.protocol.models import JsonRpcRequest, JsonRpcResponse, Method, ResultFormat, ToolResult
from localmcp.server.resources import ResourceCatalog
from localmcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_NOTIFICATION,
    ATTR_REQUEST_ID,
    ATTR_RESOURCE_NAME,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from localmcp.config.models import ServerSettings
    from localmcp.store.state import StateStore
    from localmcp.tools.registry import ToolRegistry

    MethodHandler = Callable[[dict[str, Any]], dict[str, Any] | None]

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

# Never answered, whether or not the client attached an id.
SILENT_METHODS = frozenset({Method.INITIALIZED})


class Dispatcher:
    """Routes requests by method name; ``tools/call`` further by tool name.

    Usage::

        dispatcher = Dispatcher(registry, store, settings)
        response = dispatcher.handle(JsonRpcRequest(id=1, method="tools/list"))
        line = dispatcher.handle_raw('{"id":2,"method":"initialize"}')

    Requests are processed one at a time; the store lock is held for the
    whole dispatch so concurrent transports still see one writer at a time.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        store: StateStore,
        settings: ServerSettings,
        *,
        result_format: ResultFormat = ResultFormat.CONTENT,
    ) -> None:
        self._registry = registry
        self._store = store
        self._settings = settings
        self._result_format = result_format
        self._resources = ResourceCatalog(store)
        self._routes: dict[Method, MethodHandler] = {
            Method.INITIALIZE: self._initialize,
            Method.TOOLS_LIST: self._tools_list,
            Method.TOOLS_CALL: self._tools_call,
            Method.RESOURCES_LIST: self._resources_list,
            Method.RESOURCES_READ: self._resources_read,
            Method.PROMPTS_LIST: self._prompts_list,
            Method.INITIALIZED: self._initialized,
        }

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def result_format(self) -> ResultFormat:
        return self._result_format

    # -- entry points ----------------------------------------------------

    def dispatch(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any] | None:
        """Run *method* and return its result, or ``None`` for notification-only methods.

        Raises:
            MethodNotFoundError: If *method* is not recognised.
            ProtocolError: Any other protocol failure raised by the handler.
        """
        known = Method.lookup(method)
        if known is None:
            raise MethodNotFoundError(method)
        with self._store.lock:
            return self._routes[known](params or {})

    def handle(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Process one decoded request under JSON-RPC response rules."""
        with _tracer.start_as_current_span("localmcp.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            span.set_attribute(ATTR_NOTIFICATION, request.is_notification)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            try:
                result = self.dispatch(request.method, request.params)
            except ProtocolError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                if request.is_notification:
                    logger.warning("Notification %s failed: %s", request.method, exc)
                    return None
                logger.info("Request %r (%s) failed: %s", request.id, request.method, exc)
                return codec.error_response(request.id, exc)
            except Exception:
                logger.exception("Unexpected error handling %s", request.method)
                if request.is_notification:
                    return None
                return codec.error_response(request.id, ProtocolError("Internal error"))

            if request.is_notification or Method.lookup(request.method) in SILENT_METHODS:
                return None
            return codec.success_response(request.id, result if result is not None else {})

    def handle_raw(self, raw: str | bytes) -> str | None:
        """Decode, handle, and encode one message unit.

        A unit that cannot be decoded is answered with an error carrying
        ``id: null`` unless it is recognisably an id-less notification.
        """
        try:
            request = codec.decode(raw)
        except (ParseError, InvalidRequestError) as exc:
            has_id, request_id = codec.peek_id(raw)
            logger.warning("Rejected message unit: %s", exc)
            if not has_id:
                return None
            return codec.encode(codec.error_response(request_id, exc))

        response = self.handle(request)
        if response is None:
            return None
        return codec.encode(response)

    # -- method handlers -------------------------------------------------

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client = params.get("clientInfo")
        if not isinstance(client, dict):
            client = {}
        logger.info(
            "Initialize from %s %s",
            client.get("name", "unknown client"),
            client.get("version", ""),
        )
        if self._result_format is ResultFormat.OUTPUT:
            capabilities: dict[str, Any] = {
                "tools": [d.to_wire() for d in self._registry.descriptors()],
                "resources": [r.to_wire() for r in self._resources.descriptors()],
            }
        else:
            capabilities = {"tools": {}, "resources": {}, "prompts": {}}
        return {
            "protocolVersion": self._settings.protocol_version,
            "capabilities": capabilities,
            "serverInfo": {"name": self._settings.name, "version": self._settings.version},
        }

    def _tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": [d.to_wire() for d in self._registry.descriptors()]}

    def _tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            msg = "arguments must be an object"
            raise InvalidRequestError(msg)

        with _tracer.start_as_current_span("localmcp.tools.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, str(name))
            logger.debug("Tool call: %s with arguments: %s", name, arguments)
            text = self._registry.invoke(name, arguments)
        return ToolResult.from_text(text).to_wire(self._result_format)

    def _resources_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"resources": [r.to_wire() for r in self._resources.descriptors()]}

    def _resources_read(self, params: dict[str, Any]) -> dict[str, Any]:
        ref = params.get("name") or params.get("uri")
        with _tracer.start_as_current_span("localmcp.resources.read") as span:
            span.set_attribute(ATTR_RESOURCE_NAME, str(ref))
            resource, text = self._resources.read(ref)
        if self._result_format is ResultFormat.OUTPUT:
            return {"content": text}
        return {"contents": [{"uri": resource.uri, "mimeType": resource.mime_type, "text": text}]}

    def _prompts_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"prompts": []}

    def _initialized(self, params: dict[str, Any]) -> None:
        logger.debug("Client signalled initialized")
        return None

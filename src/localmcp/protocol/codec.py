"""Envelope codec — raw message units to requests and responses to raw units.

One message unit is a line of text (stdio) or an HTTP body. Decoding never
hands the dispatcher a malformed request: it either returns a validated
:class:`JsonRpcRequest` or raises :class:`ParseError` /
:class:`InvalidRequestError`.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from localmcp.protocol.errors import InvalidRequestError, ParseError, ProtocolError
from localmcp.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse, RequestId


def load_object(raw: str | bytes) -> dict[str, Any]:
    """Parse *raw* as JSON and require a top-level object."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(str(exc)) from exc
    if not isinstance(data, dict):
        raise InvalidRequestError("expected a JSON object")
    return data


def _check_params(params: Any) -> dict[str, Any]:
    if params is None:
        return {}
    if not isinstance(params, dict):
        raise InvalidRequestError("params must be an object")
    return params


def _check_method(method: Any) -> str:
    if not isinstance(method, str) or not method:
        raise InvalidRequestError("method must be a non-empty string")
    return method


def decode(raw: str | bytes) -> JsonRpcRequest:
    """Decode one JSON-RPC message unit."""
    data = load_object(raw)
    method = _check_method(data.get("method"))
    params = _check_params(data.get("params"))

    request_id = data.get("id")
    # bool is an int subclass; JSON true/false is never a valid id.
    if request_id is not None and (
        isinstance(request_id, bool) or not isinstance(request_id, (int, float, str))
    ):
        raise InvalidRequestError("id must be a string or a number")

    try:
        return JsonRpcRequest(
            jsonrpc=str(data.get("jsonrpc", "2.0")),
            method=method,
            id=request_id,
            params=params,
        )
    except ValidationError as exc:
        raise InvalidRequestError(str(exc)) from exc


def decode_http_body(raw: str | bytes) -> tuple[str, dict[str, Any]]:
    """Decode the id-less ``{method, params}`` body of an HTTP request."""
    data = load_object(raw)
    return _check_method(data.get("method")), _check_params(data.get("params"))


def peek_id(raw: str | bytes) -> tuple[bool, RequestId | None]:
    """Best-effort look at the ``id`` of a unit that failed to decode.

    Returns ``(has_id, id)``. A unit that is not a JSON object is treated
    as carrying an id so the caller answers with a generic error.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return True, None
    if not isinstance(data, dict):
        return True, None
    request_id = data.get("id")
    if request_id is None:
        return False, None
    if isinstance(request_id, bool) or not isinstance(request_id, (int, float, str)):
        return True, None
    return True, request_id


def success_response(request_id: RequestId | None, result: dict[str, Any]) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, result=result)


def error_response(request_id: RequestId | None, exc: ProtocolError) -> JsonRpcResponse:
    return JsonRpcResponse(
        id=request_id,
        error=JsonRpcError(code=exc.code, message=str(exc)),
    )


def encode(response: JsonRpcResponse) -> str:
    """Serialise a response as exactly one compact JSON object (no newline)."""
    return json.dumps(response.to_wire(), separators=(",", ":"), ensure_ascii=False)

"""OpenTelemetry tracing helpers for localmcp.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed. When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from localmcp.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("localmcp.dispatch") as span:
        span.set_attribute(ATTR_METHOD, "tools/call")

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install local-mcp[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout localmcp instrumentation
# ---------------------------------------------------------------------------

ATTR_METHOD = "localmcp.method"
ATTR_REQUEST_ID = "localmcp.request.id"
ATTR_NOTIFICATION = "localmcp.notification"
ATTR_TOOL_NAME = "localmcp.tool.name"
ATTR_RESOURCE_NAME = "localmcp.resource.name"
ATTR_ERROR_CODE = "localmcp.error.code"

_INSTRUMENTATION_NAME = "localmcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "localmcp",
    otlp_endpoint: str | None = None,
) -> None:
    """Configure OpenTelemetry tracing (requires ``local-mcp[otel]``).

    Spans go to the OTLP endpoint when one is given, otherwise to a console
    exporter writing to stderr (stdout is reserved for protocol output).

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install local-mcp[otel]"
        )
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if otlp_endpoint:
        _add_otlp_exporter(provider, BatchSpanProcessor, otlp_endpoint)
    else:
        _add_stderr_exporter(provider, SimpleSpanProcessor)

    trace.set_tracer_provider(provider)


def _add_stderr_exporter(provider: Any, processor_cls: Any) -> None:
    """Attach the console exporter, pointed at stderr."""
    import sys

    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports]

    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))


def _add_otlp_exporter(provider: Any, processor_cls: Any, endpoint: str) -> None:
    """Attach the OTLP gRPC exporter."""
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required for OTLP export. "
            "Install it with: pip install local-mcp[otel]"
        )
        raise ImportError(msg) from exc

    provider.add_span_processor(processor_cls(OTLPSpanExporter(endpoint=endpoint)))

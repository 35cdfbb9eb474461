"""ToolRegistry — static name-to-handler table for ``tools/call``."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from localmcp.protocol.errors import HandlerFaultError, RegistrationError, UnknownToolError
from localmcp.protocol.models import ToolDescriptor

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: descriptor fields plus the handler that runs it."""

    name: str
    description: str
    handler: ToolHandler
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )


class ToolRegistry:
    """Maintains the name-to-tool map and invokes handlers.

    Usage::

        registry = ToolRegistry()
        registry.register(ToolSpec(name="add_note", description="...", handler=fn))
        registry.freeze()

        registry.descriptors()                      # for tools/list
        registry.invoke("add_note", {"content": "x"})  # for tools/call

    Arguments are passed to handlers as received. ``inputSchema.required`` is
    advertised but not enforced, so a missing field reaches the handler as
    ``None`` via ``args.get``.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}
        self._frozen = False

    def register(self, spec: ToolSpec) -> None:
        """Add *spec* to the table, validating the descriptor."""
        if self._frozen:
            msg = f"Registry is frozen; cannot register {spec.name!r}"
            raise RegistrationError(msg)
        if not spec.name:
            msg = "Tool name must be non-empty"
            raise RegistrationError(msg)
        if spec.name in self._tools:
            msg = f"Duplicate tool name: {spec.name}"
            raise RegistrationError(msg)
        if not spec.description:
            msg = f"Tool {spec.name!r} needs a description"
            raise RegistrationError(msg)
        if spec.input_schema.get("type") != "object":
            msg = f"Tool {spec.name!r} input schema must be of type 'object'"
            raise RegistrationError(msg)
        self._tools[spec.name] = spec

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: object) -> ToolSpec:
        spec = self._tools.get(name) if isinstance(name, str) else None
        if spec is None:
            raise UnknownToolError(name)
        return spec

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        """Return descriptors in registration order (handlers omitted)."""
        return [spec.descriptor() for spec in self._tools.values()]

    def invoke(self, name: object, arguments: Mapping[str, Any]) -> str:
        """Run the named tool and return its text output.

        Raises:
            UnknownToolError: If no tool is registered under *name*.
            HandlerFaultError: If the handler raises.
        """
        spec = self.get(name)
        try:
            return spec.handler(arguments)
        except Exception as exc:
            logger.exception("Tool %s failed", spec.name)
            raise HandlerFaultError(spec.name) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

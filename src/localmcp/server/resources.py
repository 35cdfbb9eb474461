"""Declared resources served by ``resources/list`` and ``resources/read``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from localmcp.protocol.errors import UnknownResourceError
from localmcp.protocol.models import ResourceDescriptor

if TYPE_CHECKING:
    from localmcp.store.state import StateStore

LOCAL_DATA = ResourceDescriptor(
    name="local_data",
    description="Access local data store",
    uri="local://local_data",
    mime_type="application/json",
)


class ResourceCatalog:
    """Resolves resource names (or URIs) to their current content."""

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._resources = {LOCAL_DATA.name: LOCAL_DATA}

    def descriptors(self) -> list[ResourceDescriptor]:
        return list(self._resources.values())

    def resolve(self, ref: str | None) -> ResourceDescriptor:
        for resource in self._resources.values():
            if ref in (resource.name, resource.uri):
                return resource
        raise UnknownResourceError(ref)

    def read(self, ref: str | None) -> tuple[ResourceDescriptor, str]:
        """Return the descriptor and a JSON rendering of the resource."""
        resource = self.resolve(ref)
        return resource, json.dumps(self._store.snapshot(), indent=2)

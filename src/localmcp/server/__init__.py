"""Server core — dispatcher, resources, and construction."""

from localmcp.server.builder import build_dispatcher, build_documents
from localmcp.server.dispatcher import Dispatcher
from localmcp.server.resources import ResourceCatalog

__all__ = [
    "Dispatcher",
    "ResourceCatalog",
    "build_dispatcher",
    "build_documents",
]

"""Wire settings into a ready-to-serve :class:`Dispatcher`."""

from __future__ import annotations

import logging

from localmcp.config.models import ServerSettings
from localmcp.protocol.models import ResultFormat
from localmcp.server.dispatcher import Dispatcher
from localmcp.store.documents import DocumentStore, FileDocumentStore, InMemoryDocumentStore
from localmcp.store.state import StateStore
from localmcp.tools import build_registry
from localmcp.utils.telemetry import configure_telemetry

logger = logging.getLogger(__name__)


def build_documents(settings: ServerSettings) -> DocumentStore:
    """Return the document store selected by ``settings.persist``, bootstrapped."""
    if settings.persist:
        store = FileDocumentStore(settings.resolved_data_dir)
        store.bootstrap()
        logger.info("Prompt directory: %s", store.root)
        return store
    documents = InMemoryDocumentStore()
    documents.bootstrap()
    return documents


def build_dispatcher(
    settings: ServerSettings | None = None,
    *,
    result_format: ResultFormat = ResultFormat.CONTENT,
    documents: DocumentStore | None = None,
) -> Dispatcher:
    """Build documents, state, registry, and dispatcher for one server process.

    Steps:
    1. Optionally configure telemetry.
    2. Create (or reuse) the document store.
    3. Create the State Store over it.
    4. Build and freeze the tool registry for the configured profile.
    """
    settings = settings or ServerSettings()

    if settings.telemetry.enabled:
        configure_telemetry(service_name=settings.name, otlp_endpoint=settings.telemetry.otlp_endpoint)

    documents = documents if documents is not None else build_documents(settings)
    store = StateStore(documents)
    registry = build_registry(store, documents, settings.tool_profile)
    logger.info("Registered %d tools (%s profile)", len(registry), settings.tool_profile)
    return Dispatcher(registry, store, settings, result_format=result_format)

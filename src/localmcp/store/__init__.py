"""State Store and key/document persistence."""

from localmcp.store.documents import (
    DocumentStore,
    FileDocumentStore,
    InMemoryDocumentStore,
    project_key,
)
from localmcp.store.models import Note, Task, TaskStatus
from localmcp.store.state import StateStore

__all__ = [
    "DocumentStore",
    "FileDocumentStore",
    "InMemoryDocumentStore",
    "Note",
    "StateStore",
    "Task",
    "TaskStatus",
    "project_key",
]

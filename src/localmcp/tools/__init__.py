"""Tool catalogue — builds the registry served by ``tools/list`` and ``tools/call``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from localmcp.tools import system
from localmcp.tools.notes import NoteTools
from localmcp.tools.prompts import PromptTools
from localmcp.tools.registry import ToolHandler, ToolRegistry, ToolSpec
from localmcp.tools.tasks import TaskTools

if TYPE_CHECKING:
    from localmcp.store.documents import DocumentStore
    from localmcp.store.state import StateStore

ToolProfile = Literal["all", "notes", "tasks"]

_NOTES_PROFILE = ("add_note", "get_notes", "clear_notes", "system_info")
_TASKS_PROFILE = (
    "write_prompt",
    "add_task",
    "view_tasks",
    "update_task_status",
    "check_results",
    "check_status",
    "create_project_plan",
    "clear_all",
)


def build_registry(
    store: StateStore,
    documents: DocumentStore,
    profile: ToolProfile = "all",
) -> ToolRegistry:
    """Register every tool of *profile* and freeze the registry."""
    specs = [
        *NoteTools(store).specs(),
        *PromptTools(store, documents).specs(),
        *TaskTools(store, documents).specs(),
        *system.specs(),
    ]
    if profile == "notes":
        specs = [s for s in specs if s.name in _NOTES_PROFILE]
    elif profile == "tasks":
        by_name = {s.name: s for s in specs}
        specs = [by_name[name] for name in _TASKS_PROFILE]

    registry = ToolRegistry()
    for spec in specs:
        registry.register(spec)
    registry.freeze()
    return registry


__all__ = [
    "ToolHandler",
    "ToolProfile",
    "ToolRegistry",
    "ToolSpec",
    "build_registry",
]

"""Note tools — ``add_note``, ``get_notes``, ``clear_notes``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from localmcp.tools.registry import ToolSpec

if TYPE_CHECKING:
    from localmcp.store.state import StateStore

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


class NoteTools:
    def __init__(self, store: StateStore) -> None:
        self._store = store

    def add_note(self, args: Mapping[str, Any]) -> str:
        note = self._store.add_note(args.get("content"))
        return f"Note added with ID: {note.id}"

    def get_notes(self, args: Mapping[str, Any]) -> str:
        notes = self._store.notes()
        if not notes:
            return "No notes stored yet"
        return json.dumps([n.model_dump() for n in notes], indent=2)

    def clear_notes(self, args: Mapping[str, Any]) -> str:
        return f"Cleared {self._store.clear_notes()} notes"

    def specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="add_note",
                description="Add a note to local storage",
                handler=self.add_note,
                input_schema={
                    "type": "object",
                    "properties": {
                        "content": {"type": "string", "description": "The note content to add"},
                    },
                    "required": ["content"],
                },
            ),
            ToolSpec(
                name="get_notes",
                description="Get all stored notes",
                handler=self.get_notes,
                input_schema=dict(_EMPTY_SCHEMA),
            ),
            ToolSpec(
                name="clear_notes",
                description="Clear all notes",
                handler=self.clear_notes,
                input_schema=dict(_EMPTY_SCHEMA),
            ),
        ]

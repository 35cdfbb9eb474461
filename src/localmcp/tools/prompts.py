"""Prompt-engineer tools — hand instructions to a coding agent through documents.

The agent on the other side reads ``current_prompt`` and writes
``results``; this server only writes the prompt and status and reads the
results back.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from localmcp.store.documents import CURRENT_PROMPT, RESULTS, STATUS, idle_status
from localmcp.store.models import now_iso
from localmcp.tools.registry import ToolSpec

if TYPE_CHECKING:
    from localmcp.store.documents import DocumentStore
    from localmcp.store.state import StateStore

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}

_PROMPT_TEMPLATE = """\
# Claude Code Instructions

**Priority**: {priority}
**Created**: {created}
**Created by**: Claude Desktop (Prompt Engineer)

## Task Instructions

{prompt}

---

*This prompt was created by Claude Desktop acting as your prompt engineer. \
Please execute these instructions and write the results to the results document.*"""


class PromptTools:
    def __init__(self, store: StateStore, documents: DocumentStore) -> None:
        self._store = store
        self._documents = documents

    def write_prompt(self, args: Mapping[str, Any]) -> str:
        priority = args.get("priority") or "medium"
        created = now_iso()
        self._documents.write(
            CURRENT_PROMPT,
            _PROMPT_TEMPLATE.format(priority=priority, created=created, prompt=args.get("prompt")),
        )
        self._documents.write(
            STATUS,
            {"status": "new_prompt_available", "lastUpdate": created, "priority": priority},
        )
        return (
            f"Prompt written to {CURRENT_PROMPT}\n\n"
            "Claude Code should read this document and execute the instructions."
        )

    def check_results(self, args: Mapping[str, Any]) -> str:
        return self._documents.read(RESULTS, "No results file found yet.")

    def check_status(self, args: Mapping[str, Any]) -> str:
        status = self._documents.read(STATUS) or idle_status()
        return json.dumps(status, indent=2)

    def clear_all(self, args: Mapping[str, Any]) -> str:
        with self._store.lock:
            self._documents.delete(CURRENT_PROMPT)
            self._documents.delete(RESULTS)
            self._store.reset()
            self._documents.write(STATUS, idle_status())
        return "All prompts, tasks, and results cleared"

    def specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="write_prompt",
                description="Write a prompt/instruction for Claude Code to execute",
                handler=self.write_prompt,
                input_schema={
                    "type": "object",
                    "properties": {
                        "prompt": {
                            "type": "string",
                            "description": "The detailed prompt/instruction for Claude Code",
                        },
                        "priority": {
                            "type": "string",
                            "enum": ["low", "medium", "high", "urgent"],
                            "description": "Priority level of the task",
                        },
                    },
                    "required": ["prompt"],
                },
            ),
            ToolSpec(
                name="check_results",
                description="Check the results/output from Claude Code",
                handler=self.check_results,
                input_schema=dict(_EMPTY_SCHEMA),
            ),
            ToolSpec(
                name="check_status",
                description="Check current working status of Claude Code",
                handler=self.check_status,
                input_schema=dict(_EMPTY_SCHEMA),
            ),
            ToolSpec(
                name="clear_all",
                description="Clear all prompts, tasks, and results",
                handler=self.clear_all,
                input_schema=dict(_EMPTY_SCHEMA),
            ),
        ]

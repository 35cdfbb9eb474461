"""Task tools — the task list shared with the coding agent.

``add_task``, ``view_tasks``, ``update_task_status`` and
``create_project_plan`` all operate on the State Store's task list, which is
re-read from the ``task_list`` document on every call and written back
after each change.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from localmcp.store.documents import project_key
from localmcp.store.models import Task, TaskStatus, now_iso, timestamp_ms
from localmcp.tools.registry import ToolSpec

if TYPE_CHECKING:
    from localmcp.store.documents import DocumentStore
    from localmcp.store.state import StateStore

_STATUSES = [s.value for s in TaskStatus]
_STRING_LIST = {"type": "array", "items": {"type": "string"}}


class TaskTools:
    def __init__(self, store: StateStore, documents: DocumentStore) -> None:
        self._store = store
        self._documents = documents

    def add_task(self, args: Mapping[str, Any]) -> str:
        task = self._store.add_task(
            args.get("task"),
            category=args.get("category"),
            dependencies=args.get("dependencies"),
        )
        return f"Task added with ID: {task.id}\nTotal tasks: {self._store.task_count()}"

    def view_tasks(self, args: Mapping[str, Any]) -> str:
        status = args.get("status") or "all"
        tasks = self._store.tasks(None if status == "all" else status)
        lines = "\n".join(t.render() for t in tasks)
        return lines or "No tasks found"

    def update_task_status(self, args: Mapping[str, Any]) -> str:
        task_id = args.get("task_id")
        status = args.get("status")
        task = self._store.update_task(task_id, status, args.get("notes"))
        if task is None:
            return f"Task {task_id} not found"
        return f"Task {task_id} updated to status: {status}"

    def create_project_plan(self, args: Mapping[str, Any]) -> str:
        project_name = args.get("project_name")
        objectives = args.get("objectives")
        if objectives is None:
            msg = "objectives is required"
            raise ValueError(msg)
        if not isinstance(project_name, str):
            msg = "project_name is required"
            raise ValueError(msg)

        stamp = timestamp_ms()
        tasks = [
            Task(
                id=f"task_{stamp}_{i}",
                description=objective,
                category="objective",
                priority="high",
            )
            for i, objective in enumerate(objectives)
        ]
        plan = {
            "project_name": project_name,
            "objectives": objectives,
            "milestones": args.get("milestones") or [],
            "tech_stack": args.get("tech_stack") or [],
            "created": now_iso(),
            "tasks": [
                {
                    "id": t.id,
                    "description": t.description,
                    "category": t.category,
                    "status": t.status,
                    "priority": t.priority,
                }
                for t in tasks
            ],
        }

        # The plan is persisted before the task list; no rollback if the second write fails.
        key = project_key(project_name)
        self._documents.write(key, plan)
        self._store.extend_tasks(tasks)

        return f"Project plan created: {key}\nGenerated {len(tasks)} tasks from objectives"

    def specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="add_task",
                description="Add a task to the task list for Claude Code",
                handler=self.add_task,
                input_schema={
                    "type": "object",
                    "properties": {
                        "task": {"type": "string", "description": "Task description"},
                        "category": {
                            "type": "string",
                            "description": "Task category (e.g., development, testing, documentation)",
                        },
                        "dependencies": {
                            **_STRING_LIST,
                            "description": "List of task IDs this task depends on",
                        },
                    },
                    "required": ["task"],
                },
            ),
            ToolSpec(
                name="view_tasks",
                description="View all tasks in the task list",
                handler=self.view_tasks,
                input_schema={
                    "type": "object",
                    "properties": {
                        "status": {
                            "type": "string",
                            "enum": ["all", *_STATUSES],
                            "description": "Filter tasks by status",
                        },
                    },
                },
            ),
            ToolSpec(
                name="update_task_status",
                description="Update the status of a task",
                handler=self.update_task_status,
                input_schema={
                    "type": "object",
                    "properties": {
                        "task_id": {"type": "string", "description": "Task ID to update"},
                        "status": {
                            "type": "string",
                            "enum": _STATUSES,
                            "description": "New status for the task",
                        },
                        "notes": {
                            "type": "string",
                            "description": "Optional notes about the status update",
                        },
                    },
                    "required": ["task_id", "status"],
                },
            ),
            ToolSpec(
                name="create_project_plan",
                description="Create a comprehensive project plan for Claude Code to follow",
                handler=self.create_project_plan,
                input_schema={
                    "type": "object",
                    "properties": {
                        "project_name": {"type": "string", "description": "Name of the project"},
                        "objectives": {**_STRING_LIST, "description": "List of project objectives"},
                        "milestones": {**_STRING_LIST, "description": "Key milestones"},
                        "tech_stack": {**_STRING_LIST, "description": "Technologies to use"},
                    },
                    "required": ["project_name", "objectives"],
                },
            ),
        ]

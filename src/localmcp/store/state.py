"""StateStore — process-wide mutable state manipulated by tool handlers.

One instance is created per server process and injected into the
dispatcher. Notes live in memory only. Tasks are re-read from the
``task_list`` document at the start of every task operation and written
back after each change, so edits made by other processes are kept.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from localmcp.store.documents import TASK_LIST
from localmcp.store.models import Note, Task, now_iso

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localmcp.store.documents import DocumentStore

logger = logging.getLogger(__name__)


class StateStore:
    """Notes and tasks, guarded by a single re-entrant lock."""

    def __init__(self, documents: DocumentStore) -> None:
        self._documents = documents
        self._lock = threading.RLock()
        self._notes: list[Note] = []

    @property
    def documents(self) -> DocumentStore:
        return self._documents

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # -- notes -----------------------------------------------------------

    def add_note(self, content: Any) -> Note:
        with self._lock:
            note = Note(content=content)
            self._notes.append(note)
            return note

    def notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes)

    def clear_notes(self) -> int:
        """Drop every note and return how many were removed."""
        with self._lock:
            count = len(self._notes)
            self._notes = []
            return count

    # -- tasks -----------------------------------------------------------

    def add_task(
        self,
        description: Any,
        category: Any = None,
        dependencies: Any = None,
    ) -> Task:
        with self._lock:
            tasks = self._load_tasks()
            task = Task(
                description=description,
                category=category or "general",
                dependencies=_as_given(dependencies),
            )
            tasks.append(task)
            self._save_tasks(tasks)
            return task

    def extend_tasks(self, new_tasks: Iterable[Task]) -> int:
        """Append pre-built tasks; returns the new total."""
        with self._lock:
            tasks = self._load_tasks()
            tasks.extend(new_tasks)
            self._save_tasks(tasks)
            return len(tasks)

    def tasks(self, status: str | None = None) -> list[Task]:
        """Return tasks in insertion order, optionally filtered by *status*."""
        with self._lock:
            tasks = self._load_tasks()
            if status is None:
                return tasks
            return [t for t in tasks if t.status == status]

    def task_count(self) -> int:
        with self._lock:
            return len(self._load_tasks())

    def find_task(self, task_id: str | None) -> Task | None:
        with self._lock:
            return _find(self._load_tasks(), task_id)

    def update_task(self, task_id: str | None, status: Any, notes: Any = None) -> Task | None:
        """Update one task in the stored list; returns ``None`` when no task matches."""
        with self._lock:
            tasks = self._load_tasks()
            task = _find(tasks, task_id)
            if task is None:
                return None
            task.status = status
            task.last_update = now_iso()
            if notes:
                task.notes = notes
            self._save_tasks(tasks)
            return task

    def reset(self) -> None:
        """Forget every note and task and rewrite an empty task list."""
        with self._lock:
            self._notes = []
            self._save_tasks([])

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "notes": [n.model_dump() for n in self._notes],
                "tasks": [t.to_document() for t in self._load_tasks()],
            }

    # -- persistence -----------------------------------------------------

    def _load_tasks(self) -> list[Task]:
        document = self._documents.read(TASK_LIST, {"tasks": []})
        raw_tasks = document.get("tasks", []) if isinstance(document, dict) else []
        if not isinstance(raw_tasks, list):
            logger.warning("Ignoring task list that is not a list: %r", raw_tasks)
            return []
        tasks: list[Task] = []
        for raw in raw_tasks:
            try:
                tasks.append(Task.model_validate(raw))
            except ValueError:
                logger.warning("Skipping malformed task entry: %r", raw)
        return tasks

    def _save_tasks(self, tasks: list[Task]) -> None:
        self._documents.write(TASK_LIST, {"tasks": [t.to_document() for t in tasks]})


def _find(tasks: list[Task], task_id: str | None) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def _as_given(dependencies: Any) -> Any:
    if not dependencies:
        return []
    if isinstance(dependencies, list):
        return list(dependencies)
    return dependencies

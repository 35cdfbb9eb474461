"""State Store entries — notes and tasks created by tool calls."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


def timestamp_ms() -> int:
    """Wall-clock milliseconds; two calls within one millisecond may collide."""
    return time.time_ns() // 1_000_000


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class Note(BaseModel):
    """A note appended by ``add_note``; ``content`` is stored as given."""

    id: int = Field(default_factory=timestamp_ms)
    content: Any = None
    timestamp: str = Field(default_factory=now_iso)


class Task(BaseModel):
    """A unit of work tracked on the task list.

    Fields filled from tool arguments take any JSON value, so documents
    written by other tools and arguments of an unexpected type (an
    out-of-range ``status``, a numeric description) round-trip unchanged.
    """

    model_config = {"populate_by_name": True}

    id: str = Field(default_factory=lambda: f"task_{timestamp_ms()}")
    description: Any = None
    category: Any = "general"
    dependencies: Any = Field(default_factory=list)
    status: Any = TaskStatus.PENDING.value
    created: str = Field(default_factory=now_iso)
    last_update: str | None = Field(default=None, alias="lastUpdate")
    notes: Any = None
    priority: str | None = None

    def render(self) -> str:
        """One-line rendering used by ``view_tasks``."""
        return f"[{self.status}] {self.id}: {self.description} ({self.category})"

    def to_document(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)

"""Document persistence backends.

:class:`DocumentStore` defines the key/document protocol used by the tool
handlers for artifacts that outlive a single call (task list, status,
prompt, results, project plans). :class:`InMemoryDocumentStore` provides a
dict-based implementation suitable for testing; :class:`FileDocumentStore`
keeps one file per key under a directory.

Text keys hold strings; every other key holds a JSON value.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

TASK_LIST = "task_list"
STATUS = "status"
CURRENT_PROMPT = "current_prompt"
RESULTS = "results"

TEXT_KEYS = frozenset({CURRENT_PROMPT, RESULTS})

_WHITESPACE = re.compile(r"\s+")


def project_key(project_name: str) -> str:
    """Return the document key of a project plan (whitespace runs become ``_``)."""
    return "project_" + _WHITESPACE.sub("_", project_name)


def idle_status() -> dict[str, Any]:
    return {"status": "idle", "lastUpdate": datetime.now(UTC).isoformat()}


def _is_text(key: str) -> bool:
    return key in TEXT_KEYS


def _serialise(key: str, content: Any) -> str:
    if _is_text(key):
        return str(content)
    return json.dumps(content, indent=2)


class DocumentStore(Protocol):
    """Key/document protocol (last write wins, no locking)."""

    def read(self, key: str, default: Any = None) -> Any:
        """Return the parsed document, or *default* if it does not exist."""
        ...

    def write(self, key: str, content: Any) -> None:
        """Persist *content* under *key* (upsert semantics)."""
        ...

    def delete(self, key: str) -> None:
        """Remove a document (no-op if absent)."""
        ...

    def exists(self, key: str) -> bool:
        """Return ``True`` if a document is stored under *key*."""
        ...

    def keys(self) -> list[str]:
        """Return the stored keys in sorted order."""
        ...


class InMemoryDocumentStore:
    """Dict-backed :class:`DocumentStore` implementation.

    Stores documents serialised so that each :meth:`read` returns a fresh,
    independent copy (mimicking the file-backed store).
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def read(self, key: str, default: Any = None) -> Any:
        data = self._store.get(key)
        if data is None:
            return default
        if _is_text(key):
            return data
        return json.loads(data)

    def write(self, key: str, content: Any) -> None:
        self._store[key] = _serialise(key, content)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def exists(self, key: str) -> bool:
        return key in self._store

    def keys(self) -> list[str]:
        return sorted(self._store)

    def bootstrap(self) -> None:
        _seed(self)


class FileDocumentStore:
    """One file per key under *root*: ``<key>.md`` for text, ``<key>.json`` otherwise."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        suffix = ".md" if _is_text(key) else ".json"
        return self._root / f"{key}{suffix}"

    def bootstrap(self) -> None:
        """Create the directory and seed the task list and status documents."""
        self._root.mkdir(parents=True, exist_ok=True)
        _seed(self)

    def read(self, key: str, default: Any = None) -> Any:
        path = self.path_for(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default
        if _is_text(key):
            return raw
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt document %s", path)
            return default

    def write(self, key: str, content: Any) -> None:
        self._root.mkdir(parents=True, exist_ok=True)
        self.path_for(key).write_text(_serialise(key, content), encoding="utf-8")

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def keys(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return sorted(p.stem for p in self._root.iterdir() if p.suffix in {".md", ".json"})


def _seed(store: DocumentStore) -> None:
    if not store.exists(TASK_LIST):
        store.write(TASK_LIST, {"tasks": []})
    if not store.exists(STATUS):
        store.write(STATUS, idle_status())

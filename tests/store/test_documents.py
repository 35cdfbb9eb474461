"""Tests for the document stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from localmcp.store.documents import (
    CURRENT_PROMPT,
    STATUS,
    TASK_LIST,
    FileDocumentStore,
    InMemoryDocumentStore,
    project_key,
)


class TestProjectKey:
    def test_whitespace_runs_collapse(self) -> None:
        assert project_key("My  Cool\tApp") == "project_My_Cool_App"

    def test_plain_name(self) -> None:
        assert project_key("api") == "project_api"


class TestInMemoryDocumentStore:
    def test_read_default(self) -> None:
        docs = InMemoryDocumentStore()
        assert docs.read("missing") is None
        assert docs.read("missing", {"tasks": []}) == {"tasks": []}

    def test_read_returns_copy(self) -> None:
        docs = InMemoryDocumentStore()
        docs.write(TASK_LIST, {"tasks": []})
        first = docs.read(TASK_LIST)
        first["tasks"].append("mutated")
        assert docs.read(TASK_LIST) == {"tasks": []}

    def test_text_documents(self) -> None:
        docs = InMemoryDocumentStore()
        docs.write(CURRENT_PROMPT, "# hi")
        assert docs.read(CURRENT_PROMPT) == "# hi"

    def test_delete_is_idempotent(self) -> None:
        docs = InMemoryDocumentStore()
        docs.write("k", 1)
        docs.delete("k")
        docs.delete("k")
        assert not docs.exists("k")

    def test_bootstrap_seeds(self) -> None:
        docs = InMemoryDocumentStore()
        docs.bootstrap()
        assert docs.read(TASK_LIST) == {"tasks": []}
        assert docs.read(STATUS)["status"] == "idle"
        assert docs.keys() == [STATUS, TASK_LIST]


class TestFileDocumentStore:
    def test_bootstrap_creates_directory(self, tmp_path: Path) -> None:
        root = tmp_path / "prompts"
        docs = FileDocumentStore(root)
        docs.bootstrap()
        assert (root / "task_list.json").is_file()
        assert (root / "status.json").is_file()

    def test_bootstrap_keeps_existing(self, tmp_path: Path) -> None:
        docs = FileDocumentStore(tmp_path)
        docs.write(TASK_LIST, {"tasks": [{"id": "task_1"}]})
        docs.bootstrap()
        assert docs.read(TASK_LIST) == {"tasks": [{"id": "task_1"}]}

    def test_text_key_uses_markdown_file(self, tmp_path: Path) -> None:
        docs = FileDocumentStore(tmp_path)
        docs.write(CURRENT_PROMPT, "do the thing")
        assert (tmp_path / "current_prompt.md").read_text() == "do the thing"
        assert docs.read(CURRENT_PROMPT) == "do the thing"

    def test_json_round_trip(self, tmp_path: Path) -> None:
        docs = FileDocumentStore(tmp_path)
        docs.write("project_x", {"objectives": ["a"]})
        assert docs.read("project_x") == {"objectives": ["a"]}
        assert docs.keys() == ["project_x"]

    def test_corrupt_json_returns_default(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "status.json").write_text("{not json")
        docs = FileDocumentStore(tmp_path)
        assert docs.read(STATUS, {"status": "idle"}) == {"status": "idle"}
        assert "corrupt" in caplog.text

    def test_delete_missing_is_noop(self, tmp_path: Path) -> None:
        docs = FileDocumentStore(tmp_path)
        docs.delete("results")
        assert not docs.exists("results")

    def test_keys_when_directory_missing(self, tmp_path: Path) -> None:
        assert FileDocumentStore(tmp_path / "nope").keys() == []

# tests/test_task_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_cli.tasks.task_models import Task
from todo_cli.tasks.task_store import TaskStore, TaskStoreCorruptedError, TaskStoreError


def test_load_missing_file_returns_empty_list(store: TaskStore) -> None:
    assert store.load() == []
    assert not store.path.exists()


def test_save_then_load_preserves_order_text_and_flags(store: TaskStore) -> None:
    tasks = [
        Task("Buy milk", False),
        Task("Call mom", True),
        Task("  spaces  kept ", False),
        Task("Café ☕", True),
    ]
    store.save(tasks)
    assert store.load() == tasks


def test_save_writes_indented_array_with_task_and_completed_keys(store: TaskStore) -> None:
    store.save([Task("Buy milk"), Task("Walk dog", True)])

    text = store.path.read_text("utf-8")
    assert "\n  {" in text
    assert json.loads(text) == [
        {"task": "Buy milk", "completed": False},
        {"task": "Walk dog", "completed": True},
    ]


def test_save_overwrites_whole_file_and_leaves_no_temp_file(store: TaskStore) -> None:
    store.save([Task("a"), Task("b"), Task("c")])
    store.save([Task("only")])

    assert store.load() == [Task("only")]
    assert sorted(p.name for p in store.path.parent.iterdir()) == ["todos.json"]


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "dir" / "todos.json")
    store.save([Task("x")])
    assert store.load() == [Task("x")]


def test_load_reads_file_written_by_other_tools(store: TaskStore) -> None:
    store.path.write_text('[{"task": "from elsewhere", "completed": true}]', "utf-8")
    assert store.load() == [Task("from elsewhere", True)]


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        '{"task": "x", "completed": false}',
        '[{"task": "x"}]',
        '[{"task": 1, "completed": false}]',
        '[{"task": "x", "completed": "yes"}]',
        '["just a string"]',
    ],
)
def test_load_corrupted_file_raises_and_leaves_file_untouched(store: TaskStore, content: str) -> None:
    store.path.write_text(content, "utf-8")

    with pytest.raises(TaskStoreCorruptedError) as exc_info:
        store.load()

    assert isinstance(exc_info.value, TaskStoreError)
    assert exc_info.value.path == store.path
    assert store.path.read_text("utf-8") == content


def test_load_non_utf8_file_is_corrupted_and_left_untouched(store: TaskStore) -> None:
    content = b"\xff\xfe[garbage"
    store.path.write_bytes(content)

    with pytest.raises(TaskStoreCorruptedError):
        store.load()

    assert store.path.read_bytes() == content


def test_save_unencodable_text_keeps_old_file_and_no_temp_file(store: TaskStore) -> None:
    store.save([Task("keep me")])
    before = store.path.read_bytes()

    with pytest.raises(TaskStoreError):
        store.save([Task("keep me"), Task("bad\udcff")])

    assert store.path.read_bytes() == before
    assert sorted(p.name for p in store.path.parent.iterdir()) == ["todos.json"]


def test_load_propagates_other_os_errors(tmp_path: Path) -> None:
    # A directory where the file should be: reading fails with an OSError other than "not found".
    path = tmp_path / "todos.json"
    path.mkdir()

    with pytest.raises(OSError):
        TaskStore(path).load()

"""Tests for the JSON backed shortcut store."""

import json
from pathlib import Path

import pytest

from projexts.core.store import ShortcutStore
from projexts.dtos.shortcut import Shortcut
from projexts.errors import DuplicateShortcutError, NotFoundError, StorageError, ValidationError


def test_load_creates_empty_store(store: ShortcutStore, store_path: Path):
    assert not store_path.exists()

    assert store.load() == []
    assert store_path.exists()
    assert json.loads(store_path.read_text()) == []


def test_save_then_load_preserves_order(store: ShortcutStore):
    shortcuts = [
        Shortcut("web", ["npm", "run", "dev"]),
        Shortcut("api", ["/srv/api/run.sh", "--reload"]),
        Shortcut("docs", ["mkdocs", "serve"]),
    ]

    store.save(shortcuts)

    assert store.load() == shortcuts


def test_store_file_layout(store: ShortcutStore, store_path: Path):
    store.save([Shortcut("build", ["make", "all"])])

    data = json.loads(store_path.read_text())
    assert data == [{"project_name": "build", "run_command": ["make", "all"]}]


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"project_name": "x"}',
        '[{"project_name": "x"}]',
        '[{"project_name": "x", "run_command": "echo hi"}]',
        '[{"project_name": 3, "run_command": ["echo"]}]',
        "[1, 2]",
    ],
)
def test_load_rejects_malformed_content(store: ShortcutStore, store_path: Path, content):
    store_path.parent.mkdir(parents=True)
    store_path.write_text(content)

    with pytest.raises(StorageError):
        store.load()


def test_load_rejects_invalid_utf8(store: ShortcutStore, store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_bytes(b'[{"project_name": "\xff", "run_command": ["echo"]}]')

    with pytest.raises(StorageError, match="not valid UTF-8"):
        store.load()


def test_load_store_path_is_directory(store: ShortcutStore, store_path: Path):
    store_path.mkdir(parents=True)

    with pytest.raises(StorageError, match="Cannot read shortcut store"):
        store.load()


def test_save_failure_raises_storage_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = ShortcutStore(blocker / "store.json")

    with pytest.raises(StorageError):
        store.save([Shortcut("x", ["echo"])])


def test_add_appends_in_order(store: ShortcutStore):
    store.add("first", ["echo", "one"])
    store.add("second", ["echo", "two"])

    assert [s.name for s in store.list()] == ["first", "second"]


def test_add_empty_command_fails(store: ShortcutStore):
    with pytest.raises(ValidationError):
        store.add("build", [])
    assert store.list() == []


def test_add_empty_name_fails(store: ShortcutStore):
    with pytest.raises(ValidationError):
        store.add("", ["echo"])


def test_add_normalizes_relative_paths(store: ShortcutStore, tmp_path: Path, monkeypatch):
    project = tmp_path / "project"
    project.mkdir()
    (project / "run.sh").write_text("#!/bin/sh\n")
    monkeypatch.chdir(project)

    shortcut = store.add("proj", ["./run.sh", "--port", "8000", "missing.txt"])

    assert shortcut.command == [
        str((project / "run.sh").resolve()),
        "--port",
        "8000",
        "missing.txt",
    ]
    assert store.find("proj").command == shortcut.command


def test_add_keeps_tokens_longer_than_a_file_name(store: ShortcutStore):
    payload = "--data=" + "a" * 300

    shortcut = store.add("api", ["curl", payload])

    assert shortcut.command == ["curl", payload]
    assert store.find("api").command == ["curl", payload]


def test_add_requires_existing_path_when_configured(store_path: Path):
    store = ShortcutStore(store_path, require_path=True)

    with pytest.raises(ValidationError, match="no valid path in command"):
        store.add("npm", ["npm", "start"])


def test_add_allows_duplicates_by_default(store: ShortcutStore):
    store.add("build", ["make"])
    store.add("build", ["ninja"])

    assert len(store.list()) == 2
    assert store.find("build").command == ["make"]


def test_add_rejects_duplicates(store_path: Path):
    store = ShortcutStore(store_path, duplicates="reject")
    store.add("build", ["make"])

    with pytest.raises(DuplicateShortcutError):
        store.add("build", ["ninja"])
    assert store.find("build").command == ["make"]


def test_add_overwrites_duplicates_in_place(store_path: Path):
    store = ShortcutStore(store_path, duplicates="overwrite")
    store.save(
        [
            Shortcut("build", ["make"]),
            Shortcut("test", ["pytest"]),
            Shortcut("build", ["cmake"]),
        ]
    )

    store.add("build", ["ninja"])

    assert store.list() == [Shortcut("build", ["ninja"]), Shortcut("test", ["pytest"])]


def test_unknown_duplicates_policy(store_path: Path):
    with pytest.raises(ValidationError):
        ShortcutStore(store_path, duplicates="sometimes")


def test_remove_drops_every_match(store: ShortcutStore):
    store.save(
        [
            Shortcut("build", ["make"]),
            Shortcut("test", ["pytest"]),
            Shortcut("build", ["ninja"]),
        ]
    )

    removed = store.remove("build")

    assert removed == 2
    assert store.find("build") is None
    assert store.list() == [Shortcut("test", ["pytest"])]


def test_remove_missing_name_is_a_noop(store: ShortcutStore, store_path: Path):
    store.add("build", ["make"])
    before = store_path.read_text()

    assert store.remove("nonexistent") == 0
    assert store_path.read_text() == before


def test_find_returns_first_match(store: ShortcutStore):
    store.save([Shortcut("a", ["one"]), Shortcut("a", ["two"])])

    assert store.find("a").command == ["one"]
    assert store.find("b") is None


def test_get_raises_not_found(store: ShortcutStore):
    with pytest.raises(NotFoundError):
        store.get("ghost")


def test_update_replaces_first_match(store: ShortcutStore):
    store.save([Shortcut("a", ["one"]), Shortcut("a", ["two"])])

    store.update("a", ["three", "--flag"])

    assert store.list() == [Shortcut("a", ["three", "--flag"]), Shortcut("a", ["two"])]


def test_update_without_command_keeps_shortcut(store: ShortcutStore):
    store.add("build", ["make", "all"])

    shortcut = store.update("build", None)

    assert shortcut.command == ["make", "all"]
    assert store.find("build").command == ["make", "all"]


def test_update_missing_name(store: ShortcutStore):
    with pytest.raises(NotFoundError):
        store.update("ghost", ["echo"])


def test_update_empty_command_fails(store: ShortcutStore):
    store.add("build", ["make"])

    with pytest.raises(ValidationError):
        store.update("build", [])


def test_reset_then_load_is_empty(store: ShortcutStore, store_path: Path):
    store.add("build", ["make"])

    assert store.reset() is True
    assert not store_path.exists()
    assert store.load() == []


def test_reset_when_already_gone(store: ShortcutStore):
    assert store.reset() is False

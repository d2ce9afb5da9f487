"""Unit tests for key-value storage backends."""
import json

import pytest

from agichat.errors import StorageError
from agichat.storage import create_kv_store
from agichat.storage.file import FileKeyValueStore
from agichat.storage.in_memory import InMemoryKeyValueStore


class TestInMemoryStore:
    """Tests for the dict-backed backend."""

    def test_get_set_delete(self):
        store = InMemoryKeyValueStore()

        assert store.get("k") is None
        store.set("k", "v1")
        store.set("k", "v2")
        assert store.get("k") == "v2"
        store.delete("k")
        store.delete("k")
        assert store.get("k") is None

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "changed")

        assert initial == {"k": "v"}
        assert store.backend_type == "memory"


class TestFileStore:
    """Tests for the JSON document backend."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "missing.json")
        assert store.get("k") is None

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        FileKeyValueStore(path).set("agi_settings", '{"temperature": 0.2}')

        store = FileKeyValueStore(path)

        assert store.get("agi_settings") == '{"temperature": 0.2}'
        assert json.loads(path.read_text()) == {"agi_settings": '{"temperature": 0.2}'}

    def test_keys_are_independent(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "storage.json")
        store.set("a", "1")
        store.set("b", "2")
        store.delete("a")

        assert store.get("a") is None
        assert store.get("b") == "2"

    @pytest.mark.parametrize("content", [
        "{broken",
        "[1, 2]",
        pytest.param("[" * 100_000, id="deeply-nested"),
    ])
    def test_corrupt_file_raises_on_read(self, tmp_path, content):
        path = tmp_path / "storage.json"
        path.write_text(content)

        with pytest.raises(StorageError):
            FileKeyValueStore(path).get("k")

    def test_write_replaces_corrupt_file(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{broken")
        store = FileKeyValueStore(path)

        store.set("k", "v")

        assert store.get("k") == "v"

    def test_no_temporary_files_left(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "storage.json")
        store.set("k", "v")
        store.set("k", "w")

        assert [p.name for p in tmp_path.iterdir()] == ["storage.json"]

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = FileKeyValueStore(blocker / "storage.json")

        with pytest.raises(StorageError):
            store.set("k", "v")


class TestFactory:
    """Tests for create_kv_store."""

    def test_memory(self):
        assert create_kv_store("memory").backend_type == "memory"

    def test_file(self, tmp_path):
        store = create_kv_store("file", path=tmp_path / "s.json")
        assert store.backend_type == "file"
        assert store.path == tmp_path / "s.json"

    def test_unsupported_backend(self):
        with pytest.raises(ValueError, match="Unsupported storage backend"):
            create_kv_store("redis")

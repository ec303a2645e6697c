"""Tests for ProgressStore and blob store backends."""

import json

import pytest

from word_drill.exceptions import StateDecodeError, StorageError
from word_drill.models import LearningStats, ViewMode
from word_drill.services import (
    JsonFileBlobStore,
    MemoryBlobStore,
    ProgressStore,
    SqliteBlobStore,
    create_blob_store,
)


@pytest.fixture
def progress_store(memory_store):
    return ProgressStore(memory_store, "word-catalog", "learning-state")


class TestProgressStore:
    """Tests for saving and loading the two documents."""

    def test_catalog_round_trip(self, progress_store, make_catalog):
        catalog = make_catalog(3)
        progress_store.save_catalog(catalog)
        assert progress_store.load_catalog() == catalog

    def test_catalog_document_uses_file_format(self, progress_store, memory_store, make_record):
        progress_store.save_catalog([make_record(headword="привет")])
        data = json.loads(memory_store.read("word-catalog"))
        assert data[0]["headword"] == "привет"
        assert data[0]["PoS"] == "interjection"

    def test_state_round_trip(self, progress_store, make_learning_word):
        queue = [make_learning_word("a", miss_count=2), make_learning_word("b", offset=1)]
        stats = LearningStats(current_page=1, total_pages=2, hq_sets=1, missed_in_current_set=2)
        progress_store.save_state(queue, 1, stats, ViewMode.V3)

        saved = progress_store.load_state()
        assert saved.queue == queue
        assert saved.current_index == 1
        assert saved.stats == stats
        assert saved.view_mode == ViewMode.V3

    def test_missing_documents(self, progress_store):
        assert progress_store.load_catalog() == []
        assert progress_store.load_state() is None

    def test_malformed_documents_read_as_missing(self, memory_store):
        memory_store.write("word-catalog", json.dumps({"not": "a list"}))
        memory_store.write("learning-state", json.dumps({"queue": [{"headword": "x"}]}))
        store = ProgressStore(memory_store, "word-catalog", "learning-state")
        assert store.load_catalog() == []
        assert store.load_state() is None

    def test_read_failures_read_as_missing(self, failing_store):
        store = ProgressStore(failing_store, "word-catalog", "learning-state")
        assert store.load_catalog() == []
        assert store.load_state() is None

    def test_write_failures_raise(self, failing_store, make_catalog):
        store = ProgressStore(failing_store, "word-catalog", "learning-state")
        with pytest.raises(StorageError):
            store.save_catalog(make_catalog(1))

    def test_decode_state_rejects_unknown_view_mode(self):
        with pytest.raises(StateDecodeError):
            ProgressStore.decode_state(json.dumps({"queue": [], "viewMode": "v7"}))


class TestJsonFileBlobStore:
    """Tests for JsonFileBlobStore."""

    def test_write_then_read(self, tmp_path):
        store = JsonFileBlobStore(tmp_path / "data")
        store.write("learning-state", '{"a": 1}')
        assert (tmp_path / "data" / "learning-state.json").exists()
        assert store.read("learning-state") == '{"a": 1}'

    def test_missing_key_reads_none(self, tmp_path):
        assert JsonFileBlobStore(tmp_path).read("nothing") is None

    def test_rejects_path_like_keys(self, tmp_path):
        with pytest.raises(StorageError, match="Invalid storage key"):
            JsonFileBlobStore(tmp_path).write("../escape", "{}")

    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileBlobStore(blocker / "data").write("key", "{}")

    def test_delete(self, tmp_path):
        store = JsonFileBlobStore(tmp_path)
        store.write("key", "{}")
        store.delete("key")
        store.delete("key")
        assert store.read("key") is None


class TestSqliteBlobStore:
    """Tests for SqliteBlobStore."""

    def test_write_then_read(self, tmp_path):
        store = SqliteBlobStore(tmp_path / "progress.db")
        store.initialize()
        store.write("word-catalog", "[]")
        store.write("word-catalog", "[1]")
        assert store.read("word-catalog") == "[1]"

    def test_missing_database_reads_none(self, tmp_path):
        assert SqliteBlobStore(tmp_path / "missing.db").read("key") is None

    def test_delete(self, tmp_path):
        store = SqliteBlobStore(tmp_path / "progress.db")
        store.initialize()
        store.write("key", "{}")
        store.delete("key")
        assert store.read("key") is None

    def test_write_without_table_raises(self, tmp_path):
        store = SqliteBlobStore(tmp_path / "progress.db")
        with pytest.raises(StorageError):
            store.write("key", "{}")


class TestCreateBlobStore:
    """Tests for create_blob_store."""

    def test_json_backend(self, tmp_path):
        assert isinstance(create_blob_store("json", tmp_path), JsonFileBlobStore)

    def test_sqlite_backend(self, tmp_path):
        store = create_blob_store("sqlite", tmp_path)
        assert isinstance(store, SqliteBlobStore)
        assert (tmp_path / "progress.db").exists()

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(StorageError, match="Unknown storage backend"):
            create_blob_store("redis", tmp_path)


class TestMemoryBlobStore:
    """Tests for MemoryBlobStore."""

    def test_initial_contents_are_copied(self):
        initial = {"a": "1"}
        store = MemoryBlobStore(initial)
        store.write("b", "2")
        assert initial == {"a": "1"}
        assert sorted(store.keys()) == ["a", "b"]

"""
Unit tests for the storage adapters and JsonDocumentStore.

Tests cover:
- Self-healing load on missing or malformed slots
- No caching between loads
- Reset
- File-backed slot storage
"""

import json

import pytest

from domain.models import Document, Session, User
from infrastructure.storage import (
    DEFAULT_STORAGE_KEY,
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    JsonDocumentStore,
)
from tests.fakes import FakeKeyValueStorage, create_store

EMPTY = {"users": {}, "sessions": {"currentUserId": None}}


@pytest.mark.unit
class TestSelfHealingLoad:
    """A missing or malformed slot becomes an empty, persisted document."""

    def test_missing_slot_initialised(self, storage, store):
        doc = store.load()

        assert doc == Document.empty()
        assert json.loads(storage.raw(DEFAULT_STORAGE_KEY)) == EMPTY
        assert storage.write_count == 1

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            "",
            "[]",
            "null",
            '{"users": "nope", "sessions": {}}',
            '{"users": {"u1": {"id": "u1"}}, "sessions": {}}',
        ],
    )
    def test_malformed_slot_replaced(self, storage, store, raw):
        storage.seed_raw(DEFAULT_STORAGE_KEY, raw)

        doc = store.load()

        assert doc == Document.empty()
        assert json.loads(storage.raw(DEFAULT_STORAGE_KEY)) == EMPTY

    def test_valid_slot_not_rewritten(self, storage, store):
        storage.seed_raw(DEFAULT_STORAGE_KEY, json.dumps(EMPTY))
        store.load()
        assert storage.write_count == 0


@pytest.mark.unit
class TestLoadSave:
    """Load/save semantics."""

    def test_save_then_load(self, store):
        doc = store.load()
        doc.users["u1"] = User(id="u1", email="a@x.com", name="Alex", password_hash="h")
        doc.sessions = Session(current_user_id="u1")
        store.save(doc)

        loaded = store.load()
        assert loaded.users["u1"].email == "a@x.com"
        assert loaded.sessions.current_user_id == "u1"

    def test_loads_are_independent_copies(self, store):
        """Mutating a loaded document does not affect later loads."""
        first = store.load()
        first.users["u1"] = User(id="u1", email="a@x.com", name="Alex", password_hash="h")

        assert store.load().users == {}

    def test_external_change_observed(self, storage, store):
        """The store re-reads storage on every load."""
        store.load()
        external = {"users": {}, "sessions": {"currentUserId": "someone"}}
        storage.seed_raw(DEFAULT_STORAGE_KEY, json.dumps(external))

        assert store.load().sessions.current_user_id == "someone"

    def test_reset(self, storage, store):
        doc = store.load()
        doc.sessions.current_user_id = "u1"
        store.save(doc)

        reset = store.reset()

        assert reset == Document.empty()
        assert storage.removals == [DEFAULT_STORAGE_KEY]
        assert store.load() == Document.empty()

    def test_custom_key(self):
        storage = FakeKeyValueStorage()
        store = create_store(storage, key="other")
        store.load()
        assert storage.raw("other") is not None
        assert storage.raw(DEFAULT_STORAGE_KEY) is None


@pytest.mark.unit
class TestInMemoryKeyValueStorage:

    def test_get_set_remove(self):
        storage = InMemoryKeyValueStorage()
        assert storage.get_item("k") is None
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        storage.remove_item("k")
        storage.remove_item("k")
        assert storage.get_item("k") is None


@pytest.mark.unit
class TestFileKeyValueStorage:
    """Tests for the file-backed slot storage."""

    def test_round_trip(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / "data")
        assert storage.get_item("slot") is None

        storage.set_item("slot", '{"a": "é"}')

        assert storage.get_item("slot") == '{"a": "é"}'
        assert (tmp_path / "data" / "slot.json").exists()

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path)
        storage.set_item("slot", "one")
        storage.set_item("slot", "two")

        assert storage.get_item("slot") == "two"
        assert [p.name for p in tmp_path.iterdir()] == ["slot.json"]

    def test_remove_missing_is_noop(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path)
        storage.remove_item("slot")
        storage.set_item("slot", "x")
        storage.remove_item("slot")
        assert storage.get_item("slot") is None

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", ".."])
    def test_invalid_keys_rejected(self, tmp_path, key):
        storage = FileKeyValueStorage(tmp_path)
        with pytest.raises(ValueError):
            storage.set_item(key, "x")

    def test_document_store_over_files_self_heals(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path)
        (tmp_path / f"{DEFAULT_STORAGE_KEY}.json").write_bytes(b"\xff\xfe garbage")

        store = JsonDocumentStore(storage)

        assert store.load() == Document.empty()
        assert json.loads(storage.get_item(DEFAULT_STORAGE_KEY)) == EMPTY

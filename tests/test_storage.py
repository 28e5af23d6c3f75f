"""
Tests for Journal Storage
=========================
"""

import sqlite3
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from toolkit.journal import InMemoryKeyValueStore, KeyValueStore, SQLiteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Each store backend."""
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return SQLiteKeyValueStore(str(tmp_path / "kv.db"))


class TestKeyValueStores:
    """Behaviour shared by every backend."""

    def test_is_key_value_store(self, store):
        assert isinstance(store, KeyValueStore)

    def test_missing_key(self, store):
        assert store.get("paperTrades") is None

    def test_set_and_get(self, store):
        store.set("paperTrades", "[]")

        assert store.get("paperTrades") == "[]"

    def test_overwrite(self, store):
        store.set("paperTrades", "[1]")
        store.set("paperTrades", "[1, 2]")

        assert store.get("paperTrades") == "[1, 2]"

    def test_keys_are_independent(self, store):
        store.set("a", "1")
        store.set("b", "2")

        assert store.get("a") == "1"
        assert store.get("b") == "2"

    def test_delete(self, store):
        store.set("paperTrades", "[]")

        assert store.delete("paperTrades") is True
        assert store.get("paperTrades") is None
        assert store.delete("paperTrades") is False

    def test_unicode_value(self, store):
        store.set("k", '["₹ 2,000.00"]')

        assert store.get("k") == '["₹ 2,000.00"]'


class TestInMemoryKeyValueStore:
    """Tests for the dict-backed store."""

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "changed")

        assert initial["k"] == "v"


class TestSQLiteKeyValueStore:
    """Tests for the SQLite store."""

    def test_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "journal.db"
        SQLiteKeyValueStore(str(db_path))

        assert db_path.exists()

    def test_persists_across_instances(self, tmp_path):
        db_path = str(tmp_path / "journal.db")
        SQLiteKeyValueStore(db_path).set("paperTrades", '[{"id": 1}]')

        assert SQLiteKeyValueStore(db_path).get("paperTrades") == '[{"id": 1}]'

    def test_single_row_per_key(self, tmp_path):
        db_path = tmp_path / "journal.db"
        store = SQLiteKeyValueStore(str(db_path))
        store.set("paperTrades", "[]")
        store.set("paperTrades", "[1]")

        conn = sqlite3.connect(db_path)
        count = conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0]
        conn.close()

        assert count == 1

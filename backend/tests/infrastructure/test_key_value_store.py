"""Key-Value Stores — in-memory and JSON-file backends."""

import json

import pytest

from showcase.infrastructure.key_value_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)


def test_in_memory_missing_key_is_none():
    assert InMemoryKeyValueStore().get_item("usecases") is None


def test_in_memory_set_then_get():
    store = InMemoryKeyValueStore()
    store.set_item("usecases", "[]")
    assert store.get_item("usecases") == "[]"


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "store.json"
    JsonFileKeyValueStore(path).set_item("usecases", '[{"id": "a"}]')
    assert JsonFileKeyValueStore(path).get_item("usecases") == '[{"id": "a"}]'
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "usecases": '[{"id": "a"}]',
    }


def test_json_file_store_keeps_other_keys(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "store.json")
    store.set_item("a", "1")
    store.set_item("b", "2")
    assert store.get_item("a") == "1"
    assert store.get_item("b") == "2"


def test_json_file_store_missing_file_reads_none(tmp_path):
    assert JsonFileKeyValueStore(tmp_path / "absent.json").get_item("k") is None


def test_json_file_store_creates_parent_dirs(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "nested" / "dir" / "store.json")
    store.set_item("k", "v")
    assert store.get_item("k") == "v"


def test_json_file_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonFileKeyValueStore(path).get_item("k")


def test_json_file_store_leaves_no_tmp_file(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "store.json")
    store.set_item("k", "v")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]

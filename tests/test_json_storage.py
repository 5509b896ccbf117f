"""
Tests for the JSON-file talker store.
"""
from __future__ import annotations

import threading

import pytest

from api.repositories.json_storage import StorageError, TalkerStore
from conftest import SAMPLE_TALKERS


def _record(talker_id: int, name: str = "Fulano de Tal") -> dict:
    return {"id": talker_id, "name": name, "age": 30, "talk": {"watchedAt": "01/01/2021", "rate": 4}}


def test_overwrite_then_read_round_trips(tmp_path):
    store = TalkerStore(tmp_path / "talker.json")
    store.overwrite(SAMPLE_TALKERS)
    assert store.read_all() == SAMPLE_TALKERS
    # no temp files left behind
    assert [p.name for p in tmp_path.iterdir()] == ["talker.json"]


def test_read_all_degrades_to_empty(tmp_path):
    missing = TalkerStore(tmp_path / "missing.json")
    assert missing.read_all() == []

    broken = tmp_path / "broken.json"
    broken.write_text("{oops", encoding="utf-8")
    assert TalkerStore(broken).read_all() == []

    not_a_list = tmp_path / "object.json"
    not_a_list.write_text('{"id": 1}', encoding="utf-8")
    assert TalkerStore(not_a_list).read_all() == []


def test_mutation_on_corrupt_file_raises_instead_of_overwriting(tmp_path):
    path = tmp_path / "talker.json"
    path.write_text("{oops", encoding="utf-8")
    store = TalkerStore(path)
    with pytest.raises(StorageError):
        store.create(_record)
    assert path.read_text(encoding="utf-8") == "{oops"


def test_next_id_uses_max_id():
    assert TalkerStore.next_id([]) == 1
    assert TalkerStore.next_id([_record(7), _record(2)]) == 8


def test_create_on_missing_file_starts_collection(tmp_path):
    store = TalkerStore(tmp_path / "new.json")
    created = store.create(_record)
    assert created["id"] == 1
    assert store.read_all() == [created]


def test_replace_keeps_position(tmp_path):
    store = TalkerStore(tmp_path / "talker.json")
    store.overwrite([_record(1), _record(2), _record(3)])
    assert store.replace(2, _record(2, "Beltrano")) is not None
    assert [r["name"] for r in store.read_all()] == ["Fulano de Tal", "Beltrano", "Fulano de Tal"]
    assert store.replace(9, _record(9)) is None


def test_update_rate_only_touches_rate(tmp_path):
    store = TalkerStore(tmp_path / "talker.json")
    store.overwrite([_record(1)])
    updated = store.update_rate(1, 2)
    assert updated["talk"] == {"watchedAt": "01/01/2021", "rate": 2}
    assert store.update_rate(5, 2) is None


def test_delete_reports_whether_record_existed(tmp_path):
    store = TalkerStore(tmp_path / "talker.json")
    store.overwrite([_record(1), _record(2)])
    assert store.delete(1) is True
    assert store.delete(1) is False
    assert [r["id"] for r in store.read_all()] == [2]


def test_concurrent_creates_get_unique_ids(tmp_path):
    store = TalkerStore(tmp_path / "talker.json")
    store.overwrite([])

    threads = [threading.Thread(target=store.create, args=(_record,)) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r["id"] for r in store.read_all()]
    assert sorted(ids) == list(range(1, 21))

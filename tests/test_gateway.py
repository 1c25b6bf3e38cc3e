import json
import logging

from worklog import configuration
from worklog.repository.gateway import PersistenceGateway
from worklog.repository.record import RecordRepository
from worklog.repository.storage import FileStorage, InMemoryStorage

from factories import make_record


def test_load_records_from_empty_storage(gateway):
    assert gateway.load_records() == []


def test_records_round_trip_through_storage(gateway):
    records = [make_record(id="a"), make_record(id="b", notes="ação")]

    gateway.save_records(records)

    assert gateway.load_records() == records


def test_corrupt_records_slot_degrades_to_empty(caplog):
    gateway = PersistenceGateway(
        InMemoryStorage({configuration.RECORDS_KEY: "[{oops"})
    )

    with caplog.at_level(logging.WARNING):
        assert gateway.load_records() == []

    assert configuration.RECORDS_KEY in caplog.text


def test_records_slot_with_invalid_utf8_degrades_to_empty(tmp_path, caplog):
    (tmp_path / f"{configuration.RECORDS_KEY}.json").write_bytes(b"[\xff\xfe]")
    (tmp_path / f"{configuration.TAXONOMY_KEY}.json").write_bytes(b"\xff")
    gateway = PersistenceGateway(FileStorage(tmp_path))

    with caplog.at_level(logging.WARNING):
        assert gateway.load_records() == []
        assert gateway.load_taxonomy() is None

    assert configuration.RECORDS_KEY in caplog.text
    assert configuration.TAXONOMY_KEY in caplog.text


def test_records_slot_holding_an_object_degrades_to_empty():
    gateway = PersistenceGateway(
        InMemoryStorage({configuration.RECORDS_KEY: '{"id": "a"}'})
    )

    assert gateway.load_records() == []


def test_taxonomy_slot(gateway):
    assert gateway.load_taxonomy() is None

    gateway.save_taxonomy({"UNITS": ["A"]})  # type: ignore[typeddict-item]

    assert gateway.load_taxonomy() == {"UNITS": ["A"]}


def test_file_storage(tmp_path):
    storage = FileStorage(tmp_path / "nested")

    assert storage.get("slot") is None

    storage.set("slot", "ação")
    assert storage.get("slot") == "ação"
    assert (tmp_path / "nested" / "slot.json").read_text(encoding="utf-8") == "ação"
    assert [path.name for path in (tmp_path / "nested").iterdir()] == ["slot.json"]


def test_file_storage_overwrites_the_whole_slot(tmp_path):
    gateway = PersistenceGateway(FileStorage(tmp_path))
    gateway.save_records([make_record(id="a"), make_record(id="b")])

    gateway.save_records([make_record(id="c")])

    stored = json.loads((tmp_path / f"{configuration.RECORDS_KEY}.json").read_text())
    assert [record["id"] for record in stored] == ["c"]


def test_repository_saves_after_every_mutation(storage, gateway):
    repository = RecordRepository(gateway)

    repository.save_new_record(make_record(id="a"))
    repository.save_new_record(make_record(id="b"))
    assert [r["id"] for r in PersistenceGateway(storage).load_records()] == ["b", "a"]

    repository.modify_record(make_record(id="a", notes="changed"))
    assert PersistenceGateway(storage).load_records()[1]["notes"] == "changed"

    repository.delete_record("b")
    assert [r["id"] for r in PersistenceGateway(storage).load_records()] == ["a"]

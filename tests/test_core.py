import pytest

from worklog.core import Worklog
from worklog.errors import MissingCounterpartiesError, StructureError
from worklog.model.query import empty_query
from worklog.repository.gateway import PersistenceGateway
from worklog.repository.storage import InMemoryStorage

from factories import make_record


def test_record_lifecycle_is_persisted(worklog, storage):
    draft = worklog.new_draft()
    draft.set_interaction("Parecer")
    draft.select_counterparties(["Julio"])
    record = worklog.validate_and_build_record(draft)
    worklog.records.save_new_record(record)

    reopened = Worklog(PersistenceGateway(storage))
    assert reopened.load_records() == [record]

    reopened.records.delete_record(record["id"])
    assert Worklog(PersistenceGateway(storage)).load_records() == []


def test_validation_error_leaves_collection_untouched(worklog):
    draft = worklog.new_draft()
    draft.set_interaction("Parecer")

    with pytest.raises(MissingCounterpartiesError):
        worklog.validate_and_build_record(draft)

    assert worklog.load_records() == []


def test_backup_import_replaces_collection(worklog):
    worklog.save_records([make_record(id="old")])
    backup = Worklog(PersistenceGateway(InMemoryStorage()))
    backup.save_records([make_record(id="new-1"), make_record(id="new-2")])

    imported = worklog.from_json(backup.to_json())

    assert [record["id"] for record in imported] == ["new-1", "new-2"]
    assert worklog.load_records() == imported


def test_failed_backup_import_keeps_collection(worklog):
    worklog.save_records([make_record(id="kept")])

    with pytest.raises(StructureError):
        worklog.from_json("{}")

    assert [record["id"] for record in worklog.load_records()] == ["kept"]


def test_filter_summarize_and_export(worklog):
    worklog.save_records(
        [
            make_record(id="a", activity="X", duration="Até 5 min", unit="CJ"),
            make_record(
                id="b",
                activity="",
                interaction="Y",
                counterparties=["Z"],
                duration="60 a 90 min",
                unit="NLC",
            ),
        ]
    )
    query = empty_query()
    query["unit"] = "NLC"

    filtered = worklog.filter_records(query)

    assert [record["id"] for record in filtered] == ["b"]
    assert worklog.summarize(worklog.load_records())["estimated_minutes"] == 80
    assert worklog.to_csv(filtered).count("\n") == 1


def test_taxonomy_round_trip(worklog):
    worklog.taxonomy.add("UNITS", "PGE")
    exported = worklog.taxonomy.export()
    worklog.taxonomy.remove("UNITS", "PGE")

    taxonomy = worklog.taxonomy.import_from(exported)

    assert taxonomy["UNITS"] == ["CJ", "NLC", "PGE"]
    assert worklog.load_taxonomy()["UNITS"] == ["CJ", "NLC", "PGE"]

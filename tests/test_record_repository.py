import pytest

from worklog.errors import AmbiguousRecordIdError, RecordNotFoundError
from worklog.repository.record import RecordRepository

from factories import make_record


@pytest.fixture
def repository(gateway):
    repository = RecordRepository(gateway)
    repository.replace_all(
        [
            make_record(id="abc-1"),
            make_record(id="abd-2"),
            make_record(id="xyz-3"),
        ]
    )
    return repository


def test_find_by_full_id(repository):
    assert repository.find_record("abd-2")["id"] == "abd-2"


def test_find_by_unique_prefix(repository):
    assert repository.find_record("x")["id"] == "xyz-3"


def test_find_by_ambiguous_prefix(repository):
    with pytest.raises(AmbiguousRecordIdError):
        repository.find_record("ab")


def test_find_missing_or_empty_id(repository):
    with pytest.raises(RecordNotFoundError):
        repository.find_record("nope")
    with pytest.raises(RecordNotFoundError):
        repository.find_record("")


def test_modify_unknown_record_fails(repository):
    with pytest.raises(RecordNotFoundError):
        repository.modify_record(make_record(id="new"))


def test_returned_records_are_copies(repository):
    record = repository.get_record("abc-1")
    record["notes"] = "changed"

    assert repository.get_record("abc-1")["notes"] == ""

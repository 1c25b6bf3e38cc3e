from worklog.model.query import ALL_UNITS, empty_query
from worklog.query.filter import filter_records

from factories import make_record

RECORDS = [
    make_record(id="1", unit="CJ", activity="CEAI", date="2024-05-01", notes="Revisão do parecer"),
    make_record(
        id="2",
        unit="NLC",
        activity="",
        interaction="Despacho",
        counterparties=["Julio", "Fenili"],
        date="2024-05-03",
    ),
    make_record(id="3", unit="CJ", activity="CIACON", date="2024-05-05"),
]


def ids(records):
    return [record["id"] for record in records]


def test_empty_query_returns_input_in_order():
    assert filter_records(RECORDS, empty_query()) == RECORDS


def test_whitespace_text_matches_everything():
    query = empty_query()
    query["text"] = "   "

    assert filter_records(RECORDS, query) == RECORDS


def test_text_is_case_insensitive_across_fields():
    query = empty_query()

    query["text"] = "REVISÃO"
    assert ids(filter_records(RECORDS, query)) == ["1"]

    query["text"] = "fenili"
    assert ids(filter_records(RECORDS, query)) == ["2"]

    query["text"] = "despacho"
    assert ids(filter_records(RECORDS, query)) == ["2"]


def test_text_does_not_match_other_fields():
    query = empty_query()
    query["text"] = "NLC"

    assert filter_records(RECORDS, query) == []


def test_text_handles_missing_notes():
    record = make_record(id="4")
    del record["notes"]
    query = empty_query()
    query["text"] = "estudos"

    assert ids(filter_records([record], query)) == ["4"]


def test_unit_filter_and_all_sentinel():
    query = empty_query()

    query["unit"] = "CJ"
    assert ids(filter_records(RECORDS, query)) == ["1", "3"]

    query["unit"] = ALL_UNITS
    assert filter_records(RECORDS, query) == RECORDS


def test_date_range_is_inclusive():
    query = empty_query()
    query["date_from"] = "2024-05-03"
    assert ids(filter_records(RECORDS, query)) == ["2", "3"]

    query["date_to"] = "2024-05-03"
    assert ids(filter_records(RECORDS, query)) == ["2"]

    query["date_from"] = ""
    assert ids(filter_records(RECORDS, query)) == ["1", "2"]


def test_predicates_are_combined():
    query = empty_query()
    query["unit"] = "CJ"
    query["date_from"] = "2024-05-02"
    query["text"] = "ciacon"

    assert ids(filter_records(RECORDS, query)) == ["3"]

# SPDX-License-Identifier: MIT

from worklog.model.query import ALL_UNITS, RecordQuery
from worklog.model.record import Record


def searchable_text(record: Record) -> str:
    """The text a free-text query is matched against."""
    return " ".join(
        [
            record.get("activity") or "",
            record.get("interaction") or "",
            ", ".join(record.get("counterparties") or []),
            record.get("notes") or "",
        ]
    )


def matches_text(record: Record, text: str) -> bool:
    query = text.strip().lower()
    if not query:
        return True
    return query in searchable_text(record).lower()


def matches_unit(record: Record, unit: str) -> bool:
    if not unit or unit == ALL_UNITS:
        return True
    return record.get("unit") == unit


def matches_date_range(record: Record, date_from: str, date_to: str) -> bool:
    # ISO dates compare chronologically as plain strings
    date = record.get("date") or ""
    if date_from and date < date_from:
        return False
    if date_to and date > date_to:
        return False
    return True


def filter_records(records: list[Record], query: RecordQuery) -> list[Record]:
    """Return the records matching every predicate of the query, in input order."""
    return [
        record
        for record in records
        if matches_text(record, query.get("text", ""))
        and matches_unit(record, query.get("unit", ALL_UNITS))
        and matches_date_range(
            record, query.get("date_from", ""), query.get("date_to", "")
        )
    ]

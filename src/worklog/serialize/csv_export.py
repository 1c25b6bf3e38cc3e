# SPDX-License-Identifier: MIT

from typing import Any

from worklog.model.record import Record

CSV_COLUMNS = [
    "id",
    "unit",
    "activity",
    "interaction",
    "counterparties",
    "duration",
    "difficulty",
    "urgent",
    "date",
    "time",
    "notes",
]

URGENT_YES = "Sim"
URGENT_NO = "Não"
COUNTERPARTY_SEPARATOR = "; "

_CHARACTERS_REQUIRING_QUOTES = (",", '"', "\n")


def escape_cell(value: str) -> str:
    """Quote a cell only if it holds a comma, a double quote or a newline."""
    if any(character in value for character in _CHARACTERS_REQUIRING_QUOTES):
        return '"' + value.replace('"', '""') + '"'
    return value


def _cell_values(record: Record) -> dict[str, Any]:
    values: dict[str, Any] = dict(record)
    values["counterparties"] = COUNTERPARTY_SEPARATOR.join(
        record.get("counterparties") or []
    )
    values["urgent"] = URGENT_YES if record.get("urgent") else URGENT_NO
    return values


def records_to_csv(records: list[Record]) -> str:
    """
    Render records as CSV text: a fixed header row, then one row per record
    in input order. Rows are separated by a newline with none at the end.
    The voice note is never exported.
    """
    lines = [",".join(CSV_COLUMNS)]
    for record in records:
        values = _cell_values(record)
        row = []
        for column in CSV_COLUMNS:
            value = values.get(column)
            row.append(escape_cell("" if value is None else str(value)))
        lines.append(",".join(row))
    return "\n".join(lines)

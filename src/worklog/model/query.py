# SPDX-License-Identifier: MIT

from typing import TypedDict

# Unit filter value that disables the unit predicate.
ALL_UNITS = "todas"


class RecordQuery(TypedDict):
    text: str
    unit: str
    date_from: str
    date_to: str


def empty_query() -> RecordQuery:
    return {"text": "", "unit": ALL_UNITS, "date_from": "", "date_to": ""}

# SPDX-License-Identifier: MIT

import json
from typing import Any, cast

from worklog.errors import FieldError, ParseError, StructureError
from worklog.model.record import Record

_REQUIRED_FIELDS = ("id", "date", "time")


def records_to_json(records: list[Record]) -> str:
    """Serialize the collection as a pretty-printed JSON array, fields as-is."""
    return json.dumps(records, indent=2, ensure_ascii=False)


def _check_item(item: Any, index: int) -> None:
    if not isinstance(item, dict):
        raise FieldError(f"Item {index}: expected an object")
    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise FieldError(f"Item {index}: missing required fields {missing}")
    not_text = [
        field for field in _REQUIRED_FIELDS if not isinstance(item[field], str)
    ]
    if not_text:
        raise FieldError(f"Item {index}: fields {not_text} must be strings")


def records_from_json(text: str) -> list[Record]:
    """
    Parse a backup produced by records_to_json.

    The result replaces the whole collection, so nothing is returned unless
    every item passes the checks.

    Raises:
        ParseError: text is not well-formed JSON
        StructureError: the top-level value is not an array
        FieldError: an item is not an object, lacks id, date or time, or holds
            them as something other than strings
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise StructureError("Backup must be a JSON array of records")

    for index, item in enumerate(payload, start=1):
        _check_item(item, index)

    return cast(list[Record], payload)

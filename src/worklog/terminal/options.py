# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from worklog.model.query import ALL_UNITS, RecordQuery
from worklog.terminal.completion import complete_unit
from worklog.terminal.parse import parse_date

TextFilter = Annotated[
    Optional[str],
    typer.Option(
        "--text",
        "-q",
        help="case-insensitive search in activity, interaction, counterparties and notes",
    ),
]
UnitFilter = Annotated[
    str,
    typer.Option(
        "--unit",
        "-u",
        help=f"only records of this unit, '{ALL_UNITS}' for every unit",
        autocompletion=complete_unit,
    ),
]
DateFromFilter = Annotated[
    Optional[str],
    typer.Option(
        "--from",
        "-f",
        parser=parse_date,
        help="first date included: YYYY-MM-DD, today, yesterday or day offset like -7",
    ),
]
DateToFilter = Annotated[
    Optional[str],
    typer.Option(
        "--to",
        "-t",
        parser=parse_date,
        help="last date included: YYYY-MM-DD, today, yesterday or day offset like -1",
    ),
]


def build_query(
    text: Optional[str],
    unit: str,
    date_from: Optional[str],
    date_to: Optional[str],
) -> RecordQuery:
    return {
        "text": text or "",
        "unit": unit,
        "date_from": date_from or "",
        "date_to": date_to or "",
    }

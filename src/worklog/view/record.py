# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from worklog.model.record import Record
from worklog.view.header import header

SHORT_ID_LENGTH = 8


def short_id(record: Record) -> str:
    return record["id"][:SHORT_ID_LENGTH]


def describe_classification(record: Record) -> str:
    """Activity name, or the interaction followed by who it was with."""
    interaction = record.get("interaction") or ""
    if interaction:
        counterparties = record.get("counterparties") or []
        if counterparties:
            return f"{interaction} → {', '.join(counterparties)}"
        return interaction
    return record.get("activity") or ""


def records_view(
    report_name: str,
    records: list[Record],
    columns: list[str] = [
        "id",
        "date",
        "time",
        "unit",
        "classification",
        "duration",
        "difficulty",
        "urgent",
        "notes",
    ],
    no_wrap: bool = False,
) -> None:
    header(report_name)

    records_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column != "id":
            records_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            records_table.add_column(column)

    for record in records:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = short_id(record)
            elif column == "classification":
                column_value = escape(describe_classification(record))
            elif column == "urgent":
                column_value = "[red]URGENTE[/red]" if record.get("urgent") else ""
            elif column == "difficulty":
                column_value = escape(record.get("difficulty") or "—")
            elif column == "counterparties":
                column_value = escape(", ".join(record.get("counterparties") or []))
            elif column == "voice_note":
                column_value = "♪" if record.get("voice_note") else ""
            elif record.get(column) is not None:
                column_value = escape(str(record.get(column)))
            row.append(column_value)
        records_table.add_row(*row)

    console = Console()
    console.print(records_table)
    if not records:
        console.print("No records found.")


def single_record_report(record: Record) -> None:
    header("record")

    record_table = Table(box=box.SIMPLE)
    record_table.add_column("property")
    record_table.add_column("value")

    record_table.add_row("id", record["id"])
    record_table.add_row("unit", escape(record.get("unit") or ""))
    record_table.add_row("activity", escape(record.get("activity") or ""))
    record_table.add_row("interaction", escape(record.get("interaction") or ""))
    record_table.add_row(
        "counterparties", escape(", ".join(record.get("counterparties") or []))
    )
    record_table.add_row("duration", escape(record.get("duration") or ""))
    record_table.add_row("difficulty", escape(record.get("difficulty") or "—"))
    record_table.add_row("urgent", "[red]yes[/red]" if record.get("urgent") else "no")
    record_table.add_row("date", record["date"])
    record_table.add_row("time", record["time"])
    record_table.add_row("voice note", "attached" if record.get("voice_note") else "")

    console = Console()
    console.print(record_table)

    notes = record.get("notes")
    if notes:
        console.print(Panel(escape(notes), title="Notes", border_style="blue"))

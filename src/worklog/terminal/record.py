# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from worklog.core import Worklog, open_worklog
from worklog.errors import WorklogError
from worklog.model.query import ALL_UNITS
from worklog.model.taxonomy import Category
from worklog.service.record import RecordDraft
from worklog.terminal.completion import (
    complete_activity,
    complete_counterparty,
    complete_duration,
    complete_interaction,
    complete_unit,
)
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.terminal.options import (
    DateFromFilter,
    DateToFilter,
    TextFilter,
    UnitFilter,
    build_query,
)
from worklog.terminal.parse import (
    open_editor_for_text,
    parse_date,
    parse_difficulty,
    parse_time_of_day,
    read_voice_note,
)
from worklog.view import record as record_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

UnitOption = Annotated[
    Optional[str],
    typer.Option("--unit", "-u", autocompletion=complete_unit),
]
ActivityOption = Annotated[
    Optional[str],
    typer.Option(
        "--activity",
        "-a",
        help="clears any interaction and counterparties",
        autocompletion=complete_activity,
    ),
]
InteractionOption = Annotated[
    Optional[str],
    typer.Option(
        "--interaction",
        "-i",
        help="clears any activity, needs at least one --with",
        autocompletion=complete_interaction,
    ),
]
CounterpartiesOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--with",
        "-w",
        help="who the interaction was with, accepts up to 3 options",
        autocompletion=complete_counterparty,
    ),
]
DurationOption = Annotated[
    Optional[str],
    typer.Option("--duration", "-d", autocompletion=complete_duration),
]
DifficultyOption = Annotated[
    Optional[str],
    typer.Option(
        "--difficulty",
        "-df",
        parser=parse_difficulty,
        help="valid inputs: low, medium, high, very_high, unset or the label itself",
    ),
]
UrgentOption = Annotated[
    Optional[bool],
    typer.Option("--urgent/--not-urgent"),
]
DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-dt",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
TimeOption = Annotated[
    Optional[str],
    typer.Option(
        "--time",
        "-tm",
        parser=parse_time_of_day,
        help="valid inputs: (H)H:mm or now",
    ),
]
NotesOption = Annotated[Optional[str], typer.Option("--notes", "-n")]
EditNotesOption = Annotated[
    bool, typer.Option("--edit-notes", "-e", help="Open editor to write the notes")
]
VoiceNoteOption = Annotated[
    Optional[Path],
    typer.Option(
        "--voice-note",
        "-vn",
        help="audio file attached to the record as-is",
        exists=True,
        dir_okay=False,
    ),
]


def __warn_unknown_values(worklog: Worklog, draft: RecordDraft) -> None:
    # Values outside the taxonomy are allowed, just flagged
    checks = [
        (Category.UNITS, draft.unit),
        (Category.ACTIVITIES, draft.activity),
        (Category.INTERACTIONS, draft.interaction),
        (Category.DURATIONS, draft.duration),
    ]
    for category, value in checks:
        if value and value not in worklog.taxonomy.values(category):
            logger.warning("'%s' is not one of the configured %s", value, category)
    known_counterparties = worklog.taxonomy.values(Category.COUNTERPARTIES)
    for counterparty in draft.counterparties:
        if counterparty not in known_counterparties:
            logger.warning(
                "'%s' is not one of the configured %s",
                counterparty,
                Category.COUNTERPARTIES,
            )


def __apply_options(
    draft: RecordDraft,
    unit: Optional[str],
    activity: Optional[str],
    interaction: Optional[str],
    counterparties: Optional[list[str]],
    duration: Optional[str],
    difficulty: Optional[str],
    urgent: Optional[bool],
    date: Optional[str],
    time: Optional[str],
    notes: Optional[str],
    voice_note: Optional[Path],
) -> None:
    if activity and interaction:
        raise typer.BadParameter(
            "A record is either an activity or an interaction, not both"
        )

    if unit is not None:
        draft.unit = unit
    if activity is not None:
        draft.set_activity(activity)
    if interaction is not None:
        draft.set_interaction(interaction)
    if counterparties is not None:
        draft.select_counterparties(counterparties)
    if duration is not None:
        draft.duration = duration
    if difficulty is not None:
        draft.difficulty = difficulty
    if urgent is not None:
        draft.urgent = urgent
    if date is not None:
        draft.date = date
    if time is not None:
        draft.time = time
    if notes is not None:
        draft.notes = notes
    if voice_note is not None:
        draft.voice_note = read_voice_note(voice_note)


@app.command("add, a")
def add(
    unit: UnitOption = None,
    activity: ActivityOption = None,
    interaction: InteractionOption = None,
    counterparties: CounterpartiesOption = None,
    duration: DurationOption = None,
    difficulty: DifficultyOption = None,
    urgent: UrgentOption = None,
    date: DateOption = None,
    time: TimeOption = None,
    notes: NotesOption = None,
    edit_notes: EditNotesOption = False,
    voice_note: VoiceNoteOption = None,
) -> None:
    """
    Record an activity or an interaction.
    """
    worklog = open_worklog()
    draft = worklog.new_draft()
    __apply_options(
        draft,
        unit,
        activity,
        interaction,
        counterparties,
        duration,
        difficulty,
        urgent,
        date,
        time,
        notes,
        voice_note,
    )
    if edit_notes:
        draft.notes = open_editor_for_text(draft.notes) or ""

    try:
        record = worklog.validate_and_build_record(draft)
    except WorklogError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    __warn_unknown_values(worklog, draft)
    worklog.records.save_new_record(record)
    record_report.single_record_report(record)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(help="record id or a unique prefix of it")],
    unit: UnitOption = None,
    activity: ActivityOption = None,
    interaction: InteractionOption = None,
    counterparties: CounterpartiesOption = None,
    duration: DurationOption = None,
    difficulty: DifficultyOption = None,
    urgent: UrgentOption = None,
    date: DateOption = None,
    time: TimeOption = None,
    notes: NotesOption = None,
    edit_notes: EditNotesOption = False,
    voice_note: VoiceNoteOption = None,
    remove_notes: Annotated[bool, typer.Option("--remove-notes", "-rn")] = False,
    remove_voice_note: Annotated[
        bool, typer.Option("--remove-voice-note", "-rvn")
    ] = False,
) -> None:
    """
    Modify a record. The whole record is validated again and replaced.
    """
    worklog = open_worklog()
    try:
        draft = RecordDraft.from_record(worklog.records.find_record(id))
    except WorklogError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    __apply_options(
        draft,
        unit,
        activity,
        interaction,
        counterparties,
        duration,
        difficulty,
        urgent,
        date,
        time,
        notes,
        voice_note,
    )
    if remove_notes:
        draft.notes = None
    if remove_voice_note:
        draft.voice_note = None
    if edit_notes:
        draft.notes = open_editor_for_text(draft.notes) or ""

    try:
        record = worklog.validate_and_build_record(draft)
    except WorklogError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    __warn_unknown_values(worklog, draft)
    worklog.records.modify_record(record)
    record_report.single_record_report(record)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="record id or a unique prefix of it")],
) -> None:
    """
    Delete a record
    """
    worklog = open_worklog()
    try:
        record = worklog.records.find_record(id)
    except WorklogError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    worklog.records.delete_record(record["id"])
    typer.echo(f"Deleted record {record_report.short_id(record)}")


@app.command("show, sh", no_args_is_help=True)
def show(
    id: Annotated[str, typer.Argument(help="record id or a unique prefix of it")],
) -> None:
    """
    Show every field of a record
    """
    worklog = open_worklog()
    try:
        record = worklog.records.find_record(id)
    except WorklogError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    record_report.single_record_report(record)


@app.command("list, l")
def list_records(
    text: TextFilter = None,
    unit: UnitFilter = ALL_UNITS,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """
    List records, newest first, optionally filtered
    """
    worklog = open_worklog()
    records = worklog.filter_records(build_query(text, unit, date_from, date_to))
    record_report.records_view("records", records, no_wrap=no_wrap)

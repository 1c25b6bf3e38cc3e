# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from worklog import configuration
from worklog.core import open_worklog
from worklog.errors import WorklogError
from worklog.model.query import ALL_UNITS
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.terminal.options import (
    DateFromFilter,
    DateToFilter,
    TextFilter,
    UnitFilter,
    build_query,
)
from worklog.time import dated_filename

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

OutputOption = Annotated[
    Optional[Path],
    typer.Option(
        "--output",
        "-o",
        help="file or directory to write to, defaults to a dated file in the current directory",
    ),
]


def resolve_output_path(output: Optional[Path], prefix: str, extension: str) -> Path:
    if output is None:
        return Path.cwd() / dated_filename(prefix, extension)
    if output.is_dir():
        return output / dated_filename(prefix, extension)
    return output


@app.command("export-json, ej")
def export_json(output: OutputOption = None) -> None:
    """
    Write every record to a JSON backup file.
    """
    worklog = open_worklog()
    path = resolve_output_path(output, configuration.BACKUP_FILE_PREFIX, "json")
    path.write_text(worklog.to_json(), encoding="utf-8")
    typer.echo(f"Backup written to {path}")


@app.command("import-json, ij", no_args_is_help=True)
def import_json(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="backup file to restore"),
    ],
) -> None:
    """
    Replace every record with the contents of a JSON backup.
    """
    worklog = open_worklog()
    try:
        records = worklog.from_json(path.read_text(encoding="utf-8"))
    except (WorklogError, UnicodeDecodeError) as e:
        typer.echo(f"Error: import failed: {e}")
        raise typer.Exit(1)
    typer.echo(f"Backup imported: {len(records)} records")


@app.command("export-csv, ec")
def export_csv(
    text: TextFilter = None,
    unit: UnitFilter = ALL_UNITS,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    output: OutputOption = None,
) -> None:
    """
    Write the records matching the filters to a CSV file.
    """
    worklog = open_worklog()
    records = worklog.filter_records(build_query(text, unit, date_from, date_to))
    path = resolve_output_path(output, configuration.EXPORT_FILE_PREFIX, "csv")
    path.write_text(worklog.to_csv(records), encoding="utf-8")
    typer.echo(f"{len(records)} records exported to {path}")

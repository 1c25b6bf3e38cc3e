# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from worklog import configuration
from worklog.core import open_worklog
from worklog.errors import WorklogError
from worklog.model.taxonomy import Category
from worklog.terminal.backup import OutputOption, resolve_output_path
from worklog.terminal.completion import complete_category
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.view.taxonomy import taxonomy_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def parse_category(category_param: Optional[str]) -> Optional[Category]:
    if category_param is None:
        return None
    value = str(category_param).strip().upper()
    if value not in Category.__members__:
        choices = ", ".join(category.value for category in Category)
        raise typer.BadParameter(
            f"Unknown category '{category_param}', choose from: {choices}"
        )
    return Category(value)


CategoryArgument = Annotated[
    Category,
    typer.Argument(
        parser=parse_category,
        help="UNITS, ACTIVITIES, INTERACTIONS, COUNTERPARTIES or DURATIONS",
        autocompletion=complete_category,
    ),
]


@app.command("list, l")
def list_taxonomy(
    category: Annotated[
        Optional[Category],
        typer.Argument(
            parser=parse_category,
            help="show a single category",
            autocompletion=complete_category,
        ),
    ] = None,
) -> None:
    """
    Show the configured values of every category.
    """
    worklog = open_worklog()
    taxonomy_view(worklog.taxonomy.get(), category)


@app.command("add, a", no_args_is_help=True)
def add(
    category: CategoryArgument,
    value: Annotated[str, typer.Argument(help="value to add, surrounding spaces are trimmed")],
) -> None:
    """
    Add a value to a category. Blank values and duplicates are ignored.
    """
    worklog = open_worklog()
    taxonomy = worklog.taxonomy.add(category, value)
    taxonomy_view(taxonomy, category)


@app.command("remove, rm", no_args_is_help=True)
def remove(
    category: CategoryArgument,
    value: Annotated[str, typer.Argument(help="exact value to remove")],
) -> None:
    """
    Remove a value from a category.
    """
    worklog = open_worklog()
    if value not in worklog.taxonomy.values(category):
        typer.echo(f"'{value}' is not in {category.value}, nothing removed")
        return
    taxonomy = worklog.taxonomy.remove(category, value)
    taxonomy_view(taxonomy, category)


@app.command("export, e")
def export(output: OutputOption = None) -> None:
    """
    Write the taxonomy to a JSON file.
    """
    worklog = open_worklog()
    path = resolve_output_path(output, configuration.TAXONOMY_FILE_PREFIX, "json")
    path.write_text(worklog.taxonomy.export(), encoding="utf-8")
    typer.echo(f"Taxonomy written to {path}")


@app.command("import, i", no_args_is_help=True)
def import_taxonomy(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="taxonomy file to load"),
    ],
) -> None:
    """
    Replace the taxonomy with a JSON file merged over the built-in defaults.
    """
    worklog = open_worklog()
    try:
        taxonomy = worklog.taxonomy.import_from(path.read_text(encoding="utf-8"))
    except (WorklogError, UnicodeDecodeError) as e:
        typer.echo(f"Error: import failed: {e}")
        raise typer.Exit(1)
    typer.echo("Taxonomy updated")
    taxonomy_view(taxonomy)

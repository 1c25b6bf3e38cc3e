# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from worklog.logger import LOGGER_NAME
from worklog.terminal import backup, configuration, record, taxonomy
from worklog.terminal.custom_typer import OrderedAliasedTyperGroup
from worklog.terminal.summary import summary
from worklog.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="worklog - record and review your work activities in the CLI",
    no_args_is_help=True,
)
app.add_typer(record.app, name="record, r", help="Add, change and list records")
app.command(name="summary, s")(summary)
app.add_typer(backup.app, name="backup, b", help="JSON backups and CSV export")
app.add_typer(
    taxonomy.app, name="taxonomy, tx", help="Units, activities and other pick-lists"
)
app.add_typer(configuration.app, name="config, c", help="Application settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages"),
    ] = False,
) -> None:
    """
    worklog - record and review your work activities in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)


def run() -> None:
    app()

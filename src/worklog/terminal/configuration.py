# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from worklog import configuration
from worklog.repository.configuration import CONFIGURATION_REPO, LOG_LEVELS
from worklog.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s", no_args_is_help=True)
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory holding the records and taxonomy",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path", help="Go back to the default data directory"
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show or hide the header above reports",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"One of {', '.join(LOG_LEVELS)}",
        ),
    ] = None,
) -> None:
    """Change configuration settings."""
    if data_path is not None and remove_data_path:
        typer.echo("Error: --data-path and --remove-data-path cannot be combined")
        raise typer.Exit(1)

    try:
        CONFIGURATION_REPO.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            show_header=show_header,
            log_level=log_level,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    configuration.load_data_path_configuration()
    typer.echo("Configuration updated")
    view()

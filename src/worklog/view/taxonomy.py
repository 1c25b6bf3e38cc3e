# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from worklog.model.taxonomy import Category, Taxonomy
from worklog.view.header import header


def taxonomy_view(taxonomy: Taxonomy, category: Optional[Category] = None) -> None:
    header("taxonomy")

    console = Console()
    categories = [category] if category is not None else list(Category)
    for current in categories:
        table = Table(box=box.SIMPLE, title=current.value, title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("value")
        for index, value in enumerate(taxonomy[current.value], start=1):  # type: ignore[literal-required]
            table.add_row(str(index), escape(value))
        console.print(table)

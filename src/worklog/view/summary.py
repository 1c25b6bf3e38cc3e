# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from worklog.model.summary import Summary
from worklog.service.summary import estimated_hours
from worklog.view.header import header

BAR_WIDTH = 40


def summary_view(summary: Summary) -> None:
    header("summary")

    console = Console()

    totals_table = Table(box=box.SIMPLE, show_header=False)
    totals_table.add_column("property")
    totals_table.add_column("value")
    totals_table.add_row("records", str(summary["count"]))
    totals_table.add_row(
        "estimated time",
        f"{estimated_hours(summary):.1f} h ({summary['estimated_minutes']} min)",
    )
    console.print(totals_table)

    counts = summary["counts_by_group"]
    if not counts:
        return

    # Bars are scaled against the largest group
    largest = max(counts.values())
    groups_table = Table(box=box.SIMPLE)
    groups_table.add_column("group")
    groups_table.add_column("count", justify="right")
    groups_table.add_column("")
    for label, count in counts.items():
        bar_length = max(1, round(count / largest * BAR_WIDTH))
        groups_table.add_row(
            escape(label), str(count), f"[cyan]{'█' * bar_length}[/cyan]"
        )
    console.print(groups_table)

# SPDX-License-Identifier: MIT

from worklog.core import open_worklog
from worklog.model.query import ALL_UNITS
from worklog.terminal.options import (
    DateFromFilter,
    DateToFilter,
    TextFilter,
    UnitFilter,
    build_query,
)
from worklog.view.summary import summary_view


def summary(
    text: TextFilter = None,
    unit: UnitFilter = ALL_UNITS,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
) -> None:
    """
    Count records and estimate the time spent, grouped by activity or interaction.
    """
    worklog = open_worklog()
    records = worklog.filter_records(build_query(text, unit, date_from, date_to))
    summary_view(worklog.summarize(records))

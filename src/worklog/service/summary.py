# SPDX-License-Identifier: MIT

from worklog.model.record import Record
from worklog.model.summary import Summary

# Midpoint estimate in minutes for each duration label
DURATION_MINUTES: dict[str, int] = {
    "Até 5 min": 5,
    "5 a 15 min": 10,
    "15 a 30 min": 22,
    "30 a 45 min": 37,
    "45 a 60 min": 52,
    "60 a 90 min": 75,
    "Mais de 90 min": 105,
    "Mais de 120 min": 135,
    "Mais de 180 min": 195,
    "Outro (especificar)": 0,
}


def duration_minutes(label: str) -> int:
    return DURATION_MINUTES.get(label, 0)


def group_label(record: Record) -> str:
    """Records are grouped by activity, or by the interaction when there is none."""
    activity = record.get("activity")
    if activity:
        return activity
    return f"(via {record.get('interaction') or ''})"


def summarize(records: list[Record]) -> Summary:
    counts_by_group: dict[str, int] = {}
    estimated_minutes = 0
    for record in records:
        estimated_minutes += duration_minutes(record.get("duration") or "")
        label = group_label(record)
        counts_by_group[label] = counts_by_group.get(label, 0) + 1

    return {
        "count": len(records),
        "estimated_minutes": estimated_minutes,
        "counts_by_group": counts_by_group,
    }


def estimated_hours(summary: Summary) -> float:
    return round(summary["estimated_minutes"] / 60, 1)

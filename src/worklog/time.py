# SPDX-License-Identifier: MIT

import re

import pendulum

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_iso() -> str:
    """Today's local date in 'YYYY-MM-DD' format."""
    return now_local().to_date_string()


def now_time_str() -> str:
    """Current local time of day in 'HH:mm' format."""
    return now_local().format("HH:mm")


def is_iso_date(value: str) -> bool:
    if not _ISO_DATE_PATTERN.match(value):
        return False
    try:
        pendulum.from_format(value, "YYYY-MM-DD")
    except ValueError:
        return False
    return True


def dated_filename(prefix: str, extension: str) -> str:
    """Build an export filename that embeds today's date, e.g. prefix_2024-05-01.csv"""
    return f"{prefix}_{today_iso()}.{extension}"

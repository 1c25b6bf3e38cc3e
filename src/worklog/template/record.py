# SPDX-License-Identifier: MIT

from worklog.model.difficulty import Difficulty
from worklog.model.record import Record
from worklog.model.taxonomy import Taxonomy
from worklog.time import now_time_str, today_iso


def get_record_template(taxonomy: Taxonomy) -> Record:
    """Field values a fresh draft starts from. The id is assigned on accept."""
    return {
        "id": "",
        "unit": taxonomy["UNITS"][0] if taxonomy["UNITS"] else "",
        "activity": "",
        "interaction": "",
        "counterparties": [],
        "duration": taxonomy["DURATIONS"][0] if taxonomy["DURATIONS"] else "",
        "difficulty": Difficulty.UNSET,
        "urgent": False,
        "date": today_iso(),
        "time": now_time_str(),
        "notes": "",
    }

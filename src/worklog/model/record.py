# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict

from worklog.model.record_id import RecordId

MAX_COUNTERPARTIES = 3


class Record(TypedDict):
    id: RecordId
    unit: str
    activity: str  # exclusive with interaction
    interaction: str  # exclusive with activity
    counterparties: list[str]  # only set with an interaction, at most 3
    duration: str
    difficulty: str  # a Difficulty value
    urgent: bool
    date: str  # YYYY-MM-DD
    time: str  # HH:mm
    notes: NotRequired[str]
    voice_note: NotRequired[str]  # opaque audio reference, never decoded

# SPDX-License-Identifier: MIT

import logging
from enum import StrEnum
from typing import Optional

from worklog.errors import MissingClassificationError, MissingCounterpartiesError
from worklog.model.difficulty import Difficulty
from worklog.model.record import MAX_COUNTERPARTIES, Record
from worklog.model.record_id import RecordId, generate_record_id
from worklog.model.taxonomy import Taxonomy
from worklog.template.record import get_record_template

logger = logging.getLogger(__name__)


class ClassificationState(StrEnum):
    NEITHER = "neither"
    ACTIVITY_CHOSEN = "activity_chosen"
    INTERACTION_CHOSEN = "interaction_chosen"


class RecordDraft:
    """
    A record being created or edited.

    Activity and interaction are mutually exclusive. They can only be changed
    through set_activity and set_interaction, which move the draft between
    the three ClassificationState values:

    - choosing an activity clears the interaction and the counterparties
    - choosing an interaction clears the activity and keeps the counterparties,
      which must hold at least one entry before the draft is accepted

    Counterparties are capped at MAX_COUNTERPARTIES; selections over the cap
    are dropped.
    """

    def __init__(
        self,
        unit: str = "",
        duration: str = "",
        difficulty: str = Difficulty.UNSET,
        urgent: bool = False,
        date: str = "",
        time: str = "",
        notes: Optional[str] = None,
        voice_note: Optional[str] = None,
        id: Optional[RecordId] = None,
    ) -> None:
        self.id = id
        self.unit = unit
        self.duration = duration
        self.difficulty = difficulty
        self.urgent = urgent
        self.date = date
        self.time = time
        self.notes = notes
        self.voice_note = voice_note
        self._activity = ""
        self._interaction = ""
        self._counterparties: list[str] = []

    @classmethod
    def new(cls, taxonomy: Taxonomy) -> "RecordDraft":
        """Start a fresh draft with the first unit and duration, today and now."""
        template = get_record_template(taxonomy)
        return cls(
            unit=template["unit"],
            duration=template["duration"],
            difficulty=template["difficulty"],
            urgent=template["urgent"],
            date=template["date"],
            time=template["time"],
            notes=template.get("notes"),
        )

    @classmethod
    def from_record(cls, record: Record) -> "RecordDraft":
        """
        Start editing an existing record. The id is kept on accept.

        Imported backups only guarantee id, date and time, other fields may be
        missing.
        """
        draft = cls(
            unit=record.get("unit") or "",
            duration=record.get("duration") or "",
            difficulty=record.get("difficulty") or Difficulty.UNSET,
            urgent=bool(record.get("urgent")),
            date=record["date"],
            time=record["time"],
            notes=record.get("notes"),
            voice_note=record.get("voice_note"),
            id=record["id"],
        )
        if record.get("activity"):
            draft.set_activity(record["activity"])
        elif record.get("interaction"):
            draft.set_interaction(record["interaction"])
            draft.select_counterparties(record.get("counterparties") or [])
        return draft

    @property
    def activity(self) -> str:
        return self._activity

    @property
    def interaction(self) -> str:
        return self._interaction

    @property
    def counterparties(self) -> list[str]:
        return list(self._counterparties)

    @property
    def state(self) -> ClassificationState:
        if self._activity:
            return ClassificationState.ACTIVITY_CHOSEN
        if self._interaction:
            return ClassificationState.INTERACTION_CHOSEN
        return ClassificationState.NEITHER

    def set_activity(self, activity: str) -> None:
        self._activity = activity
        if activity:
            self._interaction = ""
            # Counterparties only make sense for an interaction
            self._counterparties = []

    def set_interaction(self, interaction: str) -> None:
        self._interaction = interaction
        if interaction:
            self._activity = ""

    def select_counterparties(self, counterparties: list[str]) -> None:
        """Replace the selection, keeping the first entries up to the cap."""
        if self.state == ClassificationState.ACTIVITY_CHOSEN:
            logger.debug("Ignoring counterparties for an activity record")
            return
        selected = list(dict.fromkeys(value for value in counterparties if value))
        if len(selected) > MAX_COUNTERPARTIES:
            logger.debug(
                "Dropping counterparties over the limit: %s",
                selected[MAX_COUNTERPARTIES:],
            )
        self._counterparties = selected[:MAX_COUNTERPARTIES]

    def add_counterparty(self, counterparty: str) -> None:
        if self.state == ClassificationState.ACTIVITY_CHOSEN:
            logger.debug("Ignoring counterparty for an activity record")
            return
        if not counterparty or counterparty in self._counterparties:
            return
        if len(self._counterparties) >= MAX_COUNTERPARTIES:
            logger.debug("Dropping counterparty over the limit: %s", counterparty)
            return
        self._counterparties.append(counterparty)

    def remove_counterparty(self, counterparty: str) -> None:
        self._counterparties = [
            value for value in self._counterparties if value != counterparty
        ]


def accept(draft: RecordDraft) -> Record:
    """
    Validate a draft and build the finished record.

    Raises:
        MissingClassificationError: neither activity nor interaction is set
        MissingCounterpartiesError: an interaction is set without counterparties
    """
    state = draft.state
    if state == ClassificationState.NEITHER:
        raise MissingClassificationError()
    if state == ClassificationState.INTERACTION_CHOSEN and not draft.counterparties:
        raise MissingCounterpartiesError()

    record: Record = {
        "id": draft.id if draft.id is not None else generate_record_id(),
        "unit": draft.unit,
        "activity": draft.activity,
        "interaction": draft.interaction,
        "counterparties": (
            draft.counterparties[:MAX_COUNTERPARTIES]
            if state == ClassificationState.INTERACTION_CHOSEN
            else []
        ),
        "duration": draft.duration,
        "difficulty": str(draft.difficulty),
        "urgent": draft.urgent,
        "date": draft.date,
        "time": draft.time,
    }
    if draft.notes is not None:
        record["notes"] = draft.notes
    if draft.voice_note is not None:
        record["voice_note"] = draft.voice_note
    return record


def upsert_record(records: list[Record], record: Record) -> list[Record]:
    """Replace the record with the same id, or put a new record first."""
    for index, existing in enumerate(records):
        if existing["id"] == record["id"]:
            updated = list(records)
            updated[index] = record
            return updated
    return [record, *records]


def delete_record(records: list[Record], id: RecordId) -> list[Record]:
    return [record for record in records if record["id"] != id]

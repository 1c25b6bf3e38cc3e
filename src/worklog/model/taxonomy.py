# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict


class Category(StrEnum):
    UNITS = "UNITS"
    ACTIVITIES = "ACTIVITIES"
    INTERACTIONS = "INTERACTIONS"
    COUNTERPARTIES = "COUNTERPARTIES"
    DURATIONS = "DURATIONS"


class Taxonomy(TypedDict):
    UNITS: list[str]
    ACTIVITIES: list[str]
    INTERACTIONS: list[str]
    COUNTERPARTIES: list[str]
    DURATIONS: list[str]

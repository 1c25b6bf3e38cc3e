# SPDX-License-Identifier: MIT

from typing import TypedDict


class Summary(TypedDict):
    count: int
    estimated_minutes: int
    counts_by_group: dict[str, int]  # insertion order is first-seen order

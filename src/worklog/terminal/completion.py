# SPDX-License-Identifier: MIT

from worklog.core import open_worklog
from worklog.model.taxonomy import Category


def __complete(category: Category, incomplete: str) -> list[str]:
    values = open_worklog().taxonomy.values(category)
    return [value for value in values if value.startswith(incomplete)]


def complete_unit(incomplete: str) -> list[str]:
    """Return the configured units for shell completion."""
    return __complete(Category.UNITS, incomplete)


def complete_activity(incomplete: str) -> list[str]:
    return __complete(Category.ACTIVITIES, incomplete)


def complete_interaction(incomplete: str) -> list[str]:
    return __complete(Category.INTERACTIONS, incomplete)


def complete_counterparty(incomplete: str) -> list[str]:
    return __complete(Category.COUNTERPARTIES, incomplete)


def complete_duration(incomplete: str) -> list[str]:
    return __complete(Category.DURATIONS, incomplete)


def complete_category(incomplete: str) -> list[str]:
    return [category.value for category in Category if category.value.startswith(incomplete)]

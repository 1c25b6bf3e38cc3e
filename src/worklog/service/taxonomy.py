# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from worklog.model.taxonomy import Category, Taxonomy
from worklog.repository.gateway import PersistenceGateway
from worklog.serialize.taxonomy_json import taxonomy_from_json, taxonomy_to_json
from worklog.template.taxonomy import get_default_taxonomy

logger = logging.getLogger(__name__)


def _is_label_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def merge_with_defaults(data: dict[str, Any]) -> Taxonomy:
    """
    Overlay persisted or imported category lists on the built-in defaults.

    A category present in `data` replaces the default list entirely; missing
    categories keep their defaults. Values that are not lists of strings fall
    back to the defaults. Keys that are not known categories are dropped.
    """
    merged = get_default_taxonomy()

    for key, value in data.items():
        if key not in Category.__members__:
            logger.warning("Dropping unknown taxonomy category '%s'", key)
            continue
        if not _is_label_list(value):
            logger.warning(
                "Keeping default values for category '%s': expected a list of strings",
                key,
            )
            continue
        merged[key] = list(dict.fromkeys(value))  # type: ignore[literal-required]

    return merged


class TaxonomyStore:
    """The configurable pick-lists used to classify records."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway
        self._taxonomy: Optional[Taxonomy] = None

    @property
    def taxonomy(self) -> Taxonomy:
        if self._taxonomy is None:
            self._taxonomy = self.load()
        return self._taxonomy

    def load(self) -> Taxonomy:
        data = self.gateway.load_taxonomy()
        if data is None:
            self._taxonomy = get_default_taxonomy()
        else:
            self._taxonomy = merge_with_defaults(data)
        return deepcopy(self._taxonomy)

    def __save_data(self) -> None:
        self.gateway.save_taxonomy(self.taxonomy)

    def get(self) -> Taxonomy:
        return deepcopy(self.taxonomy)

    def values(self, category: Category | str) -> list[str]:
        return list(self.taxonomy[Category(category).value])  # type: ignore[literal-required]

    def add(self, category: Category | str, value: str) -> Taxonomy:
        key = Category(category).value
        trimmed = value.strip()
        if not trimmed:
            return self.get()

        labels: list[str] = self.taxonomy[key]  # type: ignore[literal-required]
        if trimmed not in labels:
            labels.append(trimmed)
            self.__save_data()
        return self.get()

    def remove(self, category: Category | str, value: str) -> Taxonomy:
        key = Category(category).value
        labels: list[str] = self.taxonomy[key]  # type: ignore[literal-required]
        if value in labels:
            self.taxonomy[key] = [label for label in labels if label != value]  # type: ignore[literal-required]
            self.__save_data()
        return self.get()

    def import_from(self, text: str) -> Taxonomy:
        """
        Replace the taxonomy with an imported one merged over the defaults.

        Raises ParseError or StructureError and leaves the current taxonomy
        untouched when the text is rejected.
        """
        parsed = taxonomy_from_json(text)
        self._taxonomy = merge_with_defaults(parsed)
        self.__save_data()
        return self.get()

    def export(self) -> str:
        return taxonomy_to_json(self.taxonomy)

    def save(self, taxonomy: Taxonomy) -> None:
        self._taxonomy = deepcopy(taxonomy)
        self.__save_data()

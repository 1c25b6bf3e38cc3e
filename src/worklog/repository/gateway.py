# SPDX-License-Identifier: MIT

import json
import logging
from typing import Any, Optional, cast

from worklog import configuration
from worklog.model.record import Record
from worklog.model.taxonomy import Taxonomy
from worklog.repository.storage import FileStorage, StoragePort

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """
    Loads and saves the two persisted slots: the record collection and the
    taxonomy.

    No validation happens here. Unreadable slots are treated as empty so the
    application stays usable; the problem is only logged.
    """

    def __init__(self, storage: StoragePort) -> None:
        self.storage = storage

    def __read_json(self, key: str) -> Optional[Any]:
        try:
            raw = self.storage.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            logger.warning("Ignoring unreadable data in slot %s: %s", key, error)
            return None

    def load_records(self) -> list[Record]:
        data = self.__read_json(configuration.RECORDS_KEY)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(
                "Ignoring slot %s: expected a list, found %s",
                configuration.RECORDS_KEY,
                type(data).__name__,
            )
            return []
        return cast(list[Record], data)

    def save_records(self, records: list[Record]) -> None:
        self.storage.set(
            configuration.RECORDS_KEY, json.dumps(records, ensure_ascii=False)
        )

    def load_taxonomy(self) -> Optional[dict[str, Any]]:
        """Return the persisted taxonomy object, or None when missing or unreadable."""
        data = self.__read_json(configuration.TAXONOMY_KEY)
        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring slot %s: expected an object, found %s",
                configuration.TAXONOMY_KEY,
                type(data).__name__,
            )
            return None
        return data

    def save_taxonomy(self, taxonomy: Taxonomy) -> None:
        self.storage.set(
            configuration.TAXONOMY_KEY, json.dumps(taxonomy, ensure_ascii=False)
        )


def get_default_gateway() -> PersistenceGateway:
    return PersistenceGateway(FileStorage(configuration.DATA_PATH))

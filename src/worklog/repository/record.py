# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from worklog.errors import AmbiguousRecordIdError, RecordNotFoundError
from worklog.model.record import Record
from worklog.model.record_id import RecordId
from worklog.repository.gateway import PersistenceGateway
from worklog.service.record import delete_record, upsert_record


class RecordRepository:
    """
    In-memory view of the record collection.

    Every mutation writes the whole collection back through the gateway.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway
        self._records: Optional[list[Record]] = None

    @property
    def records(self) -> list[Record]:
        if self._records is None:
            self._records = self.gateway.load_records()
        return self._records

    def __save_data(self) -> None:
        self.gateway.save_records(self.records)

    def save_new_record(self, record: Record) -> RecordId:
        self._records = upsert_record(self.records, record)
        self.__save_data()
        return record["id"]

    def modify_record(self, record: Record) -> None:
        self.get_record(record["id"])
        self._records = upsert_record(self.records, record)
        self.__save_data()

    def delete_record(self, id: RecordId) -> None:
        self.get_record(id)
        self._records = delete_record(self.records, id)
        self.__save_data()

    def replace_all(self, records: list[Record]) -> None:
        self._records = deepcopy(records)
        self.__save_data()

    def get_all_records(self) -> list[Record]:
        return deepcopy(self.records)

    def get_record(self, id: RecordId) -> Record:
        matches = [record for record in self.records if record["id"] == id]
        if not matches:
            raise RecordNotFoundError(f"No record with id '{id}'")
        return deepcopy(matches[0])

    def find_record(self, id_or_prefix: str) -> Record:
        """Find a record by its full id or by a unique id prefix."""
        if not id_or_prefix:
            raise RecordNotFoundError("An id is required")

        exact = [record for record in self.records if record["id"] == id_or_prefix]
        if exact:
            return deepcopy(exact[0])

        matches = [
            record for record in self.records if record["id"].startswith(id_or_prefix)
        ]
        if not matches:
            raise RecordNotFoundError(f"No record with id '{id_or_prefix}'")
        if len(matches) > 1:
            raise AmbiguousRecordIdError(
                f"Id prefix '{id_or_prefix}' matches {len(matches)} records"
            )
        return deepcopy(matches[0])

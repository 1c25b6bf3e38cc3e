# SPDX-License-Identifier: MIT

"""Entry points presentation code uses to work with records and the taxonomy."""

from worklog.model.query import RecordQuery
from worklog.model.record import Record
from worklog.model.summary import Summary
from worklog.model.taxonomy import Taxonomy
from worklog.query.filter import filter_records
from worklog.repository.gateway import PersistenceGateway, get_default_gateway
from worklog.repository.record import RecordRepository
from worklog.serialize.csv_export import records_to_csv
from worklog.serialize.json_backup import records_from_json, records_to_json
from worklog.service.record import RecordDraft, accept
from worklog.service.summary import summarize
from worklog.service.taxonomy import TaxonomyStore


class Worklog:
    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway
        self.records = RecordRepository(gateway)
        self.taxonomy = TaxonomyStore(gateway)

    def load_records(self) -> list[Record]:
        return self.records.get_all_records()

    def save_records(self, records: list[Record]) -> None:
        self.records.replace_all(records)

    def load_taxonomy(self) -> Taxonomy:
        return self.taxonomy.load()

    def save_taxonomy(self, taxonomy: Taxonomy) -> None:
        self.taxonomy.save(taxonomy)

    def new_draft(self) -> RecordDraft:
        return RecordDraft.new(self.taxonomy.get())

    def validate_and_build_record(self, draft: RecordDraft) -> Record:
        return accept(draft)

    def filter_records(self, query: RecordQuery) -> list[Record]:
        return filter_records(self.records.get_all_records(), query)

    def summarize(self, records: list[Record]) -> Summary:
        return summarize(records)

    def to_csv(self, records: list[Record]) -> str:
        return records_to_csv(records)

    def to_json(self) -> str:
        return records_to_json(self.records.get_all_records())

    def from_json(self, text: str) -> list[Record]:
        """Replace the whole collection with a backup. Nothing changes on error."""
        imported = records_from_json(text)
        self.records.replace_all(imported)
        return self.records.get_all_records()


def open_worklog() -> Worklog:
    return Worklog(get_default_gateway())

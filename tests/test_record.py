import pytest

from worklog.errors import MissingClassificationError, MissingCounterpartiesError
from worklog.model.difficulty import Difficulty
from worklog.service.record import (
    ClassificationState,
    RecordDraft,
    accept,
    delete_record,
    upsert_record,
)
from worklog.template.taxonomy import get_default_taxonomy

from factories import make_record


def test_new_draft_starts_with_neither_chosen():
    draft = RecordDraft.new(get_default_taxonomy())

    assert draft.state == ClassificationState.NEITHER
    assert draft.unit == "CJ"
    assert draft.duration == "Até 5 min"
    assert draft.difficulty == Difficulty.UNSET
    assert draft.counterparties == []


def test_choosing_activity_clears_interaction_and_counterparties():
    draft = RecordDraft()
    draft.set_interaction("Parecer")
    draft.select_counterparties(["Julio", "Andrea"])

    draft.set_activity("CEAI")

    assert draft.state == ClassificationState.ACTIVITY_CHOSEN
    assert draft.interaction == ""
    assert draft.counterparties == []


def test_choosing_interaction_clears_activity_and_keeps_counterparties():
    draft = RecordDraft()
    draft.set_interaction("Parecer")
    draft.select_counterparties(["Julio"])
    draft.set_activity("CEAI")
    draft.set_interaction("Cota")

    assert draft.state == ClassificationState.INTERACTION_CHOSEN
    assert draft.activity == ""
    # cleared by the activity, so they must be selected again
    assert draft.counterparties == []


def test_clearing_the_chosen_side_returns_to_neither():
    draft = RecordDraft()
    draft.set_activity("CEAI")
    draft.set_activity("")

    assert draft.state == ClassificationState.NEITHER


def test_counterparties_ignored_while_activity_chosen():
    draft = RecordDraft()
    draft.set_activity("CEAI")
    draft.add_counterparty("Julio")
    draft.select_counterparties(["Andrea"])

    assert draft.counterparties == []


def test_fourth_counterparty_is_dropped():
    draft = RecordDraft()
    draft.set_interaction("Parecer")
    for name in ["A", "B", "C", "D"]:
        draft.add_counterparty(name)

    assert draft.counterparties == ["A", "B", "C"]


def test_selecting_more_than_three_keeps_the_first_three():
    draft = RecordDraft(date="2024-05-02", time="10:00")
    draft.set_interaction("Parecer")
    draft.select_counterparties(["A", "B", "C", "D"])

    record = accept(draft)

    assert record["counterparties"] == ["A", "B", "C"]


def test_remove_counterparty():
    draft = RecordDraft()
    draft.set_interaction("Parecer")
    draft.select_counterparties(["A", "B"])
    draft.remove_counterparty("A")

    assert draft.counterparties == ["B"]


def test_counterparties_property_is_a_copy():
    draft = RecordDraft()
    draft.set_interaction("Parecer")
    draft.counterparties.append("A")

    assert draft.counterparties == []


def test_accept_without_classification_fails():
    with pytest.raises(MissingClassificationError):
        accept(RecordDraft(date="2024-05-02", time="10:00"))


def test_accept_interaction_without_counterparties_fails():
    draft = RecordDraft(date="2024-05-02", time="10:00")
    draft.set_interaction("Parecer")

    with pytest.raises(MissingCounterpartiesError):
        accept(draft)


def test_accept_new_activity_record():
    draft = RecordDraft(
        unit="NLC",
        duration="5 a 15 min",
        difficulty=Difficulty.HIGH,
        urgent=True,
        date="2024-05-02",
        time="14:05",
        notes="revisão",
    )
    draft.set_activity("CIACON")

    record = accept(draft)

    assert record["id"]
    assert record["unit"] == "NLC"
    assert record["activity"] == "CIACON"
    assert record["interaction"] == ""
    assert record["counterparties"] == []
    assert record["difficulty"] == "Alta"
    assert record["urgent"] is True
    assert record["notes"] == "revisão"
    assert "voice_note" not in record


def test_accept_assigns_distinct_ids_to_new_records():
    first = RecordDraft(date="2024-05-02", time="10:00")
    first.set_activity("CEAI")
    second = RecordDraft(date="2024-05-02", time="10:00")
    second.set_activity("CEAI")

    assert accept(first)["id"] != accept(second)["id"]


def test_accept_edit_keeps_id_and_optional_fields():
    original = make_record(voice_note="data:audio/webm;base64,AAAA")
    del original["notes"]
    draft = RecordDraft.from_record(original)
    draft.set_interaction("Despacho")
    draft.add_counterparty("Julio")

    record = accept(draft)

    assert record["id"] == original["id"]
    assert record["activity"] == ""
    assert record["interaction"] == "Despacho"
    assert record["counterparties"] == ["Julio"]
    assert record["voice_note"] == "data:audio/webm;base64,AAAA"
    assert "notes" not in record


def test_from_record_restores_interaction_state():
    original = make_record(
        activity="", interaction="Parecer", counterparties=["Julio", "Andrea"]
    )

    draft = RecordDraft.from_record(original)

    assert draft.state == ClassificationState.INTERACTION_CHOSEN
    assert draft.counterparties == ["Julio", "Andrea"]
    assert accept(draft) == original


def test_from_record_tolerates_missing_fields():
    draft = RecordDraft.from_record({"id": "abc", "date": "2024-01-01", "time": "09:00"})

    assert draft.state == ClassificationState.NEITHER
    assert draft.unit == ""
    assert draft.difficulty == Difficulty.UNSET
    assert draft.urgent is False
    assert draft.notes is None

    draft.set_activity("Estudos temáticos")
    record = accept(draft)
    assert record["id"] == "abc"
    assert record["counterparties"] == []


def test_upsert_prepends_new_and_replaces_existing():
    first = make_record(id="a")
    second = make_record(id="b")
    records = upsert_record([first], second)
    assert [record["id"] for record in records] == ["b", "a"]

    edited = make_record(id="a", notes="edited")
    records = upsert_record(records, edited)
    assert [record["id"] for record in records] == ["b", "a"]
    assert records[1]["notes"] == "edited"


def test_delete_record_by_id():
    records = [make_record(id="a"), make_record(id="b")]

    assert delete_record(records, "a") == [make_record(id="b")]
    assert delete_record(records, "missing") == records

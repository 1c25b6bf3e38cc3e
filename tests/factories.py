from worklog.model.record import Record


def make_record(**overrides) -> Record:
    record: Record = {
        "id": "3f2b1c9e-0000-4000-8000-000000000001",
        "unit": "CJ",
        "activity": "Estudos temáticos",
        "interaction": "",
        "counterparties": [],
        "duration": "15 a 30 min",
        "difficulty": "Média",
        "urgent": False,
        "date": "2024-05-02",
        "time": "09:30",
        "notes": "",
    }
    record.update(overrides)  # type: ignore[typeddict-item]
    return record

import dataclasses
import json

import pytest

from models import FieldRecord, TRLRange


def test_defaults_always_have_deadlines_and_notes() -> None:
    record = FieldRecord()
    assert record.deadlines == ()
    assert record.notes == ()
    assert record.trl == TRLRange(None, None)


def test_record_is_immutable() -> None:
    record = FieldRecord()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.budget = 1  # type: ignore[misc]


def test_to_dict_is_json_serializable() -> None:
    record = FieldRecord(
        programme="LIFE",
        call_id="LIFE-2025-SAP-NAT",
        deadlines=("2025-09-23",),
        budget=1_500_000,
        trl=TRLRange(5, 7),
        expected_outcomes=("one", "two"),
        notes=("n",),
    )
    data = json.loads(json.dumps(record.to_dict()))

    assert data == {
        "programme": "LIFE",
        "callId": "LIFE-2025-SAP-NAT",
        "deadlines": ["2025-09-23"],
        "budget": 1_500_000,
        "trl": {"min": 5, "max": 7},
        "scope": None,
        "expected_outcomes": ["one", "two"],
        "eligibility": None,
        "notes": ["n"],
    }


def test_to_dict_keeps_text_outcomes() -> None:
    assert FieldRecord(expected_outcomes="prose").to_dict()["expected_outcomes"] == "prose"


def test_links_only_when_set() -> None:
    data = FieldRecord(official_link="https://a", work_programme_link="https://b.pdf").to_dict()
    assert data["official_link"] == "https://a"
    assert data["work_programme_link"] == "https://b.pdf"

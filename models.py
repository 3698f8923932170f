"""Shared typed models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PROGRAMME_NAMES: tuple[str, ...] = (
    "Horizon Europe",
    "Erasmus+",
    "LIFE",
    "Digital Europe",
)


@dataclass(frozen=True, slots=True)
class TRLRange:
    """Technology readiness range; both bounds None when not mentioned."""

    min: int | None = None
    max: int | None = None


@dataclass(frozen=True, slots=True)
class FieldRecord:
    """Structured facts extracted from one funding-call document."""

    programme: str = ""
    call_id: str | None = None
    deadlines: tuple[str, ...] = ()
    budget: int | float | None = None
    trl: TRLRange = field(default_factory=TRLRange)
    scope: str | None = None
    expected_outcomes: str | tuple[str, ...] | None = None
    eligibility: str | None = None
    notes: tuple[str, ...] = ()
    official_link: str | None = None
    work_programme_link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the flat JSON-compatible shape consumers expect.

        Link keys only appear on merged records.
        """
        outcomes = self.expected_outcomes
        data: dict[str, Any] = {
            "programme": self.programme,
            "callId": self.call_id,
            "deadlines": list(self.deadlines),
            "budget": self.budget,
            "trl": {"min": self.trl.min, "max": self.trl.max},
            "scope": self.scope,
            "expected_outcomes": list(outcomes) if isinstance(outcomes, tuple) else outcomes,
            "eligibility": self.eligibility,
            "notes": list(self.notes),
        }
        if self.official_link is not None:
            data["official_link"] = self.official_link
        if self.work_programme_link is not None:
            data["work_programme_link"] = self.work_programme_link
        return data

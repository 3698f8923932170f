"""Field-by-field combination of a topic page and its work programme."""

from __future__ import annotations

from models import FieldRecord, TRLRange


def merge_fields(
    topic: FieldRecord,
    work_programme: FieldRecord | None,
    topic_source: str,
    wp_source: str | None = None,
) -> FieldRecord:
    """Build a new record preferring topic values, except for the budget.

    Call-level indicative budgets usually live in the umbrella work
    programme, so its budget wins when present.
    """
    wp = work_programme or FieldRecord()

    notes = list(topic.notes) + list(wp.notes)
    if work_programme is not None and wp_source:
        notes.append(f"merged with work programme: {wp_source}")

    return FieldRecord(
        programme=topic.programme or wp.programme,
        call_id=topic.call_id or wp.call_id,
        deadlines=topic.deadlines or wp.deadlines,
        budget=wp.budget if wp.budget is not None else topic.budget,
        trl=TRLRange(
            min=topic.trl.min if topic.trl.min is not None else wp.trl.min,
            max=topic.trl.max if topic.trl.max is not None else wp.trl.max,
        ),
        scope=topic.scope or wp.scope,
        expected_outcomes=topic.expected_outcomes or wp.expected_outcomes or None,
        eligibility=topic.eligibility or wp.eligibility,
        notes=tuple(notes),
        official_link=topic_source,
        work_programme_link=wp_source or None,
    )

"""Deterministic field extraction over one call document's text."""

from __future__ import annotations

import logging
import re

from budget import locate_budget
from deadlines import STAGE_TWO, locate_deadlines
from models import FieldRecord
from preprocess import clean
from sections import (
    ELIGIBILITY_HEADINGS,
    OUTCOMES_HEADINGS,
    SCOPE_HEADINGS,
    format_list,
    get_section,
)
from trl import parse_trl

LOGGER = logging.getLogger(__name__)

NOTE_NO_CALL_ID = "no call id detected"
NOTE_BROAD_WORK_PROGRAMME = (
    "document looks like a broad work programme; deadlines and budget may belong to other topics"
)
NOTE_TWO_STAGE = "two-stage submission; deadlines may refer to different stages"

# More deadlines than this in a work programme means they span unrelated topics.
BROAD_DEADLINE_COUNT = 4

# Checked in order; first programme with a matching pattern wins.
_PROGRAMME_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Horizon Europe", re.compile(r"\bHorizon\s+Europe\b|(?-i:\bHORIZON-[A-Z0-9])", re.IGNORECASE)),
    ("Erasmus+", re.compile(r"\bErasmus\s*\+|(?-i:\bERASMUS-[A-Z0-9])", re.IGNORECASE)),
    ("LIFE", re.compile(r"\bLIFE(?:\s+Programme\b|-\d{4}|\b)")),
    ("Digital Europe", re.compile(r"\bDigital\s+Europe\b|(?-i:\bDIGITAL-\d{4})", re.IGNORECASE)),
)

_CALL_ID_RE = re.compile(
    r"\b(?:HORIZON|HE|LIFE|ERASMUS)-(?=[A-Za-z0-9_/.-]*\d)[A-Za-z0-9][A-Za-z0-9_/.-]*"
)
_WORK_PROGRAMME_RE = re.compile(r"\bwork\s*programme\b", re.IGNORECASE)


def extract_fields(raw_text: str) -> FieldRecord:
    """Run the full extraction pipeline and return a fresh FieldRecord."""
    text = clean(raw_text)

    call_id = detect_call_id(text)
    deadline_info = locate_deadlines(text)

    outcomes_block = get_section(text, *OUTCOMES_HEADINGS)
    outcome_items = format_list(outcomes_block)
    expected_outcomes: str | tuple[str, ...] | None = outcomes_block
    if outcome_items is not None and len(outcome_items) > 1:
        expected_outcomes = tuple(outcome_items)

    notes: list[str] = []
    if call_id is None:
        notes.append(NOTE_NO_CALL_ID)
    if _WORK_PROGRAMME_RE.search(text) and len(deadline_info.dates) > BROAD_DEADLINE_COUNT:
        notes.append(NOTE_BROAD_WORK_PROGRAMME)
    if deadline_info.stage == STAGE_TWO:
        notes.append(NOTE_TWO_STAGE)

    record = FieldRecord(
        programme=detect_programme(text),
        call_id=call_id,
        deadlines=tuple(deadline_info.dates),
        budget=locate_budget(text),
        trl=parse_trl(text),
        scope=get_section(text, *SCOPE_HEADINGS),
        expected_outcomes=expected_outcomes,
        eligibility=get_section(text, *ELIGIBILITY_HEADINGS),
        notes=tuple(notes),
    )
    LOGGER.debug(
        "Extracted fields: programme=%r call_id=%s deadlines=%s budget=%s trl=%s-%s notes=%s",
        record.programme,
        record.call_id,
        len(record.deadlines),
        record.budget,
        record.trl.min,
        record.trl.max,
        len(record.notes),
    )
    return record


def detect_programme(text: str) -> str:
    """Return the funding programme name, or "" when none is recognised."""
    for name, pattern in _PROGRAMME_PATTERNS:
        if pattern.search(text):
            return name
    return ""


def detect_call_id(text: str) -> str | None:
    """Return the first call/topic identifier, without trailing punctuation."""
    match = _CALL_ID_RE.search(text)
    if match is None:
        return None
    return match.group(0).rstrip("./_-") or None

"""Deadline dates taken only from text next to submission vocabulary."""

from __future__ import annotations

import re
from typing import NamedTuple

from dates import normalize_dates

MAX_DEADLINES = 6
WINDOW_LINES = 2

STAGE_TWO = "two-stage"
STAGE_SINGLE = "single-stage"
STAGE_UNKNOWN = "unknown"

_CONTEXT_RE = re.compile(r"deadline|cut-?off|closing|submission|opens|opening", re.IGNORECASE)
_TWO_STAGE_RE = re.compile(r"\b(?:two|2)[\s-]stages?\b", re.IGNORECASE)
_SINGLE_STAGE_RE = re.compile(r"\bsingle[\s-]stages?\b", re.IGNORECASE)


class DeadlineInfo(NamedTuple):
    dates: list[str]
    stage: str


def locate_deadlines(text: str) -> DeadlineInfo:
    """Collect dates within two lines of deadline/opening vocabulary.

    Dates elsewhere in the document (publication dates, references to past
    calls) are ignored.
    """
    lines = (text or "").splitlines()
    found: dict[str, None] = {}

    for index, line in enumerate(lines):
        if not _CONTEXT_RE.search(line):
            continue
        window = "\n".join(lines[max(0, index - WINDOW_LINES):index + WINDOW_LINES + 1])
        for iso in normalize_dates(window):
            found.setdefault(iso, None)

    return DeadlineInfo(dates=list(found)[:MAX_DEADLINES], stage=detect_stage(text))


def detect_stage(text: str) -> str:
    """Classify the submission procedure mentioned anywhere in the text."""
    if _TWO_STAGE_RE.search(text or ""):
        return STAGE_TWO
    if _SINGLE_STAGE_RE.search(text or ""):
        return STAGE_SINGLE
    return STAGE_UNKNOWN

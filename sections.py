"""Heading-delimited section location and outcome-list formatting.

Sections are located by ordered heading synonyms. The start list is tried
outermost and the end list innermost; the first (start, end) pair that spans
any text wins, even if a later pair would give a tighter span.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

MAX_OUTCOME_ITEMS = 12
MAX_OUTCOME_PARAGRAPHS = 10


def _headings(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


HeadingPair = tuple[tuple[re.Pattern[str], ...], tuple[re.Pattern[str], ...]]

SCOPE_HEADINGS: HeadingPair = (
    _headings(r"\bScope\b", r"\bObjectives?\b", r"\bSpecific challenge\b"),
    _headings(
        r"\bExpected outcomes?\b",
        r"\bExpected impacts?\b",
        r"\bEligibility\b",
        r"\bType of Action\b",
        r"\bSpecific conditions\b",
    ),
)

OUTCOMES_HEADINGS: HeadingPair = (
    _headings(r"\bExpected outcomes?\b", r"\bExpected impacts?\b", r"\bExpected EU\b"),
    _headings(
        r"\bEligibility\b",
        r"\bSpecific conditions\b",
        r"\bEvaluation\b",
        r"\bAward criteria\b",
        r"\bType of Action\b",
    ),
)

ELIGIBILITY_HEADINGS: HeadingPair = (
    _headings(r"\bEligibility(?:\s+conditions)?\b", r"\bEligibility\s+conditions\b"),
    _headings(
        r"\bEvaluation\b",
        r"\bAward criteria\b",
        r"\bBudget\b",
        r"\bCall conditions\b",
        r"\bSpecific conditions\b",
        r"\bType of Action\b",
    ),
)

_BULLET_GLYPHS = "-–•·"
_BULLET_PREFIX_RE = re.compile(rf"^[{_BULLET_GLYPHS}]+\s*")
_PAGE_HEADER_RE = re.compile(r"^\d+\s*(?:of|page)", re.IGNORECASE)
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def get_section(
    text: str,
    starts: Sequence[re.Pattern[str]],
    ends: Sequence[re.Pattern[str]],
) -> str | None:
    """Return the text between the first matching start/end heading pair.

    Both headings and an optional colon after the start heading are removed
    from the result. Pairs whose span is empty are skipped; returns None when
    no pair spans any text.
    """
    if not text:
        return None

    for start in starts:
        for end in ends:
            match = _span_pattern(start.pattern, end.pattern).search(text)
            if match is None:
                continue
            body = match.group("body").strip()
            if body:
                return body
    return None


@lru_cache(maxsize=128)
def _span_pattern(start: str, end: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?:{start})\s*:?(?P<body>.*?)(?:{end})",
        re.IGNORECASE | re.DOTALL,
    )


def format_list(block: str | None) -> list[str] | None:
    """Split an expected-outcomes block into bullet items.

    Falls back to blank-line separated paragraphs when nothing in the block
    looks like a list item.
    """
    if block is None:
        return None

    lines = [line.strip() for line in block.splitlines()]
    lines = [line for line in lines if line and not _PAGE_HEADER_RE.match(line)]
    bullets = [line for line in lines if _is_bullet_like(line)]

    if not bullets:
        paragraphs = [p.strip() for p in _PARAGRAPH_BREAK_RE.split(block) if p.strip()]
        return paragraphs[:MAX_OUTCOME_PARAGRAPHS]

    items = [_BULLET_PREFIX_RE.sub("", line) for line in bullets]
    return [item for item in items if item][:MAX_OUTCOME_ITEMS]


def _is_bullet_like(line: str) -> bool:
    return line[0] in _BULLET_GLYPHS or line.endswith((";", "."))

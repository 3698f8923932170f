"""Calendar-date mention normalization to ISO strings."""

from __future__ import annotations

import re

_MONTHS: dict[str, str] = {
    "january": "01",
    "february": "02",
    "march": "03",
    "april": "04",
    "may": "05",
    "june": "06",
    "july": "07",
    "august": "08",
    "september": "09",
    "october": "10",
    "november": "11",
    "december": "12",
}

_DATE_RE = re.compile(r"\b([0-9]{1,2})\s+([A-Za-z]+)\s+(20[0-9]{2})\b")


def normalize_dates(text: str) -> list[str]:
    """Return ISO dates for every "<day> <Month> <20yy>" mention, first-seen order.

    Unknown month words are skipped. Day/month combinations are not checked
    against the calendar: "31 February 2025" yields "2025-02-31".
    """
    found: dict[str, None] = {}
    for day, month_word, year in _DATE_RE.findall(text or ""):
        month = _MONTHS.get(month_word.lower())
        if month is None:
            continue
        found.setdefault(f"{year}-{month}-{day.zfill(2)}", None)
    return list(found)

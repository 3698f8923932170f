"""Currency-amount parsing near budget vocabulary."""

from __future__ import annotations

import re

# Characters scanned after a budget keyword when looking for its amount.
BUDGET_WINDOW = 160

_CURRENCY = r"(?:€|\$|(?<![A-Za-z])EUR(?![A-Za-z]))"
_NUMBER = r"\d{1,3}(?:[., ]\d{3})+(?!\d)(?:[.,]\d+)?|\d+(?:[.,]\d+)?"

_AMOUNT_RE = re.compile(
    rf"(?:(?P<pre>{_CURRENCY})\s*|(?<![\w.,-]))"
    rf"(?P<num>{_NUMBER})"
    r"\s*(?P<mult>millions?\b|mio\b|m\b)?"
    rf"(?:\s*(?P<post>{_CURRENCY}))?",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"(?:19|20)\d{2}")

_BUDGET_KEYWORDS: tuple[re.Pattern[str], ...] = (
    re.compile(r"indicative\s+budget", re.IGNORECASE),
    re.compile(r"total\s+(?:indicative\s+)?budget", re.IGNORECASE),
    re.compile(r"EU\s+contribution", re.IGNORECASE),
)


def parse_currency_amount(line: str | None) -> int | float | None:
    """Parse the first currency amount in a line into base units.

    "EUR 2.5 million" -> 2500000, "EUR 500,000" -> 500000. Amounts carrying
    a currency marker win over bare numbers; bare years are never amounts.
    """
    if not line:
        return None

    matches = list(_AMOUNT_RE.finditer(line))
    chosen = next((m for m in matches if m.group("pre") or m.group("post")), None)
    if chosen is None:
        chosen = next(
            (m for m in matches if m.group("mult") or not _YEAR_RE.fullmatch(m.group("num"))),
            None,
        )
    if chosen is None:
        return None

    value = _parse_number(chosen.group("num"))
    if value is None:
        return None
    if chosen.group("mult"):
        value = round(value * 1_000_000, 2)
    return int(value) if value.is_integer() else value


def _parse_number(literal: str) -> float | None:
    """Interpret separators in a numeric literal.

    Both '.' and ',' present: the last one is the decimal point. A repeated
    separator groups thousands. A lone ',' before exactly three digits groups
    thousands, otherwise it is a decimal comma. A lone '.' is ambiguous and is
    read as the decimal point.
    """
    digits = literal.replace(" ", "")
    if "." in digits and "," in digits:
        decimal = "." if digits.rfind(".") > digits.rfind(",") else ","
        thousands = "," if decimal == "." else "."
        digits = digits.replace(thousands, "").replace(decimal, ".")
    elif digits.count(",") > 1:
        digits = digits.replace(",", "")
    elif digits.count(".") > 1:
        digits = digits.replace(".", "")
    elif "," in digits:
        head, tail = digits.split(",")
        digits = head + tail if len(tail) == 3 else f"{head}.{tail}"

    try:
        return float(digits)
    except ValueError:
        return None


def locate_budget(text: str) -> int | float | None:
    """Find the budget amount following the strongest budget keyword.

    Keywords are tried in priority order (indicative budget, total budget,
    EU contribution); each occurrence is parsed over a bounded lookahead
    window and the first amount found wins.
    """
    if not text:
        return None

    for keyword in _BUDGET_KEYWORDS:
        for match in keyword.finditer(text):
            window = text[match.end():match.end() + BUDGET_WINDOW]
            amount = parse_currency_amount(window)
            if amount is not None:
                return amount
    return None

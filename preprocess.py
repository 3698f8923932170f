"""Boilerplate and markup stripping for raw call-document text."""

from __future__ import annotations

import re
from collections import Counter

# A line seen this many times is treated as a repeated page header/footer.
RECURRENCE_THRESHOLD = 3

_MARKUP_BLOCK_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"</?[A-Za-z!][^<>]*>")
_HSPACE_RE = re.compile(r"[^\S\n]+")

_EU_LANGUAGE_CODES: frozenset[str] = frozenset({
    "bg", "cs", "da", "de", "el", "en", "es", "et", "fi", "fr", "ga", "hr",
    "hu", "it", "lt", "lv", "mt", "nl", "pl", "pt", "ro", "sk", "sl", "sv",
})

_BOILERPLATE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        # portal branding and navigation
        r"^(?:eu\s+)?funding\s*(?:&|and)\s*tenders?(?:\s+portal)?$",
        r"^skip to (?:main )?content$",
        r"^(?:sign in|sign up|log ?in|log out|register)$",
        # pagination
        r"^(?:page\s+)?\d+\s*(?:/|of)\s*\d+$",
        r"^page\s+\d+$",
        # annex headers
        r"^annex\s+(?:\d+|[ivxlc]+)\b(?:\s*[-–:]\s*.{0,80})?$",
        # bare urls
        r"^(?:https?://|www\.)\S+$",
    )
)

# PDF font-encoding garbage: long unbroken capital runs or spaced-out letters.
_GIBBERISH_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[A-Z]{15,}$"),
    re.compile(r"^(?:[A-Z] ){4,}[A-Z]$"),
)


def clean(raw: str) -> str:
    """Return the document text without markup, boilerplate or repeated headers.

    Runs the cleaning pass until the text is stable, so the result is
    idempotent. Every pass that changes the text makes it shorter (apart from
    a one-off rewrite of exotic line separators), which bounds the loop.
    """
    text = raw or ""
    while True:
        cleaned = _clean_pass(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def _clean_pass(text: str) -> str:
    text = _MARKUP_BLOCK_RE.sub(" ", text)
    text = _TAG_RE.sub(" ", text)
    text = text.replace("&nbsp;", " ").replace("&amp;", "&")

    lines = [_HSPACE_RE.sub(" ", line).strip() for line in text.splitlines()]
    counts = Counter(line for line in lines if line)

    kept: list[str] = []
    for line in lines:
        if line and (counts[line] >= RECURRENCE_THRESHOLD or _is_boilerplate(line)):
            continue
        if not line and (not kept or not kept[-1]):
            continue  # leading blank or blank run
        kept.append(line)

    while kept and not kept[-1]:
        kept.pop()
    return "\n".join(kept)


def _is_boilerplate(line: str) -> bool:
    if line.lower() in _EU_LANGUAGE_CODES:
        return True
    if any(pattern.search(line) for pattern in _BOILERPLATE_PATTERNS):
        return True
    return any(pattern.search(line) for pattern in _GIBBERISH_PATTERNS)

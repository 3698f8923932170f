"""Technology Readiness Level mentions."""

from __future__ import annotations

import re

from models import TRLRange

_TRL_RANGE_RE = re.compile(r"\bTRL\s*([1-9])\s*[-–]\s*([1-9])\b", re.IGNORECASE)
_TRL_SINGLE_RE = re.compile(r"\bTRL\s*([1-9])\b", re.IGNORECASE)


def parse_trl(text: str) -> TRLRange:
    """Return the first TRL range mentioned, falling back to a single level."""
    match = _TRL_RANGE_RE.search(text or "")
    if match:
        return TRLRange(min=int(match.group(1)), max=int(match.group(2)))

    match = _TRL_SINGLE_RE.search(text or "")
    if match:
        level = int(match.group(1))
        return TRLRange(min=level, max=level)
    return TRLRange()

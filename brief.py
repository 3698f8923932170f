"""Brief assembly for uploaded files and topic URLs."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from extractor import extract_fields
from llm_client import active_model, api_key, polish_fields
from merge import merge_fields
from models import FieldRecord
from sources import (
    SourceError,
    fetch,
    fetch_pdf_text,
    find_work_programme_links,
    html_to_text,
    read_document,
)

NOTE_NO_WP_LINK = "no work programme PDF link detected on the page"
NOTE_WP_FAILED = "work programme fetch/parse failed"
POLISHED_PREFIX = "[LLM polished]"

LOGGER = logging.getLogger(__name__)


def basic_brief(fields: dict[str, Any]) -> str:
    """Deterministic plain-text brief; missing values render as N/A."""
    parts: list[str] = []
    if fields.get("programme"):
        parts.append(f"Programme: {fields['programme']}")
    if fields.get("callId"):
        parts.append(f"Call: {fields['callId']}")
    parts.append(f"Deadlines: {', '.join(fields.get('deadlines') or []) or 'N/A'}")

    budget = fields.get("budget")
    parts.append(f"Budget (EUR): {'N/A' if budget is None else f'{budget:,}'}")

    trl = fields.get("trl") or {}
    if trl.get("min") is not None and trl.get("max") is not None and trl["min"] != trl["max"]:
        trl_text = f"{trl['min']}-{trl['max']}"
    elif trl.get("min") is not None:
        trl_text = str(trl["min"])
    else:
        trl_text = "N/A"
    parts.append(f"TRL: {trl_text}")

    outcomes = fields.get("expected_outcomes")
    if isinstance(outcomes, list):
        outcomes = "\n".join(f"- {item}" for item in outcomes)

    parts.append("\nSCOPE:\n" + (fields.get("scope") or "N/A"))
    parts.append("\nEXPECTED OUTCOMES:\n" + (outcomes or "N/A"))
    parts.append("\nELIGIBILITY:\n" + (fields.get("eligibility") or "N/A"))
    if fields.get("official_link"):
        parts.append(f"\nOfficial link: {fields['official_link']}")
    return "\n".join(parts)


def brief_from_file(path: str | Path, polish: bool = True) -> dict[str, Any]:
    """Extract and brief a local PDF/HTML/text document."""
    record = extract_fields(read_document(path))
    LOGGER.info("Extracted fields from file=%s call_id=%s", path, record.call_id)
    return _respond(record, polish=polish)


def brief_from_url(url: str, polish: bool = True) -> dict[str, Any]:
    """Brief a topic page, merged with the first work programme PDF it links.

    Failure to fetch the topic page raises SourceError. Work programme
    problems only add a note to the result.
    """
    html = fetch(url).text
    topic = extract_fields(html_to_text(html))

    wp_record: FieldRecord | None = None
    wp_url: str | None = None
    extra_notes: list[str] = []

    wp_links = find_work_programme_links(html, url)
    if not wp_links:
        extra_notes.append(NOTE_NO_WP_LINK)
    else:
        wp_url = wp_links[0]
        try:
            wp_record = extract_fields(fetch_pdf_text(wp_url))
        except SourceError as exc:
            LOGGER.warning("Work programme skipped url=%s: %s", wp_url, exc)
            extra_notes.append(NOTE_WP_FAILED)
            wp_url = None

    if extra_notes:
        topic = replace(topic, notes=topic.notes + tuple(extra_notes))

    merged = merge_fields(topic, wp_record, url, wp_url)
    LOGGER.info("Merged topic url=%s work_programme=%s", url, wp_url)
    return _respond(merged, polish=polish)


def _respond(record: FieldRecord, polish: bool) -> dict[str, Any]:
    fields = record.to_dict()
    llm_text: str | None = None
    llm_error: str | None = None
    if polish:
        llm_text, llm_error = polish_fields(fields)

    brief = f"{POLISHED_PREFIX}\n\n{llm_text}" if llm_text else basic_brief(fields)
    return {
        "brief": brief,
        "fields": fields,
        "usedLLM": bool(llm_text),
        "llmError": None if llm_text else llm_error,
        "model": active_model(),
        "hasApiKey": bool(api_key()),
    }

"""Optional LLM polish of extracted call fields into a readable brief."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, NamedTuple

import anthropic
from openai import OpenAI

DEFAULT_PROVIDER = "openai"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5"
DEFAULT_TEMPERATURE = 0.2
MAX_ATTEMPTS = 2
MAX_TOKENS = 700

ERROR_NO_API_KEY = "NO_API_KEY"
ERROR_EMPTY_RESPONSE = "EMPTY_RESPONSE"

LOGGER = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a compliance-first editor. The input is trusted JSON extracted from an EU funding call.
Tasks:
1) Produce a concise 150-180 word brief.
2) Then output a 6-8 item "Key facts" list with: Programme (if known), Call ID, Deadlines, Budget, TRL, Eligibility, and Official link if present.
Rules: Use ONLY the provided JSON; if a field is missing, write "N/A". Do not speculate. Neutral, factual tone."""


class PolishResult(NamedTuple):
    text: str | None
    error: str | None


def llm_provider() -> str:
    return os.getenv("BRIEF_LLM_PROVIDER", DEFAULT_PROVIDER).strip().lower()


def active_model() -> str:
    """Model name the next polish call will use (settings are read per call)."""
    if llm_provider() == "anthropic":
        return os.getenv("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL).strip()
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL).strip()


def api_key() -> str:
    """API key of the configured provider, or an empty string."""
    name = "ANTHROPIC_API_KEY" if llm_provider() == "anthropic" else "OPENAI_API_KEY"
    return os.getenv(name, "").strip()


def polish_fields(fields: dict[str, Any]) -> PolishResult:
    """Ask the configured LLM for a brief; failures come back as error values.

    Never raises: a missing key, an empty reply or an API failure after
    MAX_ATTEMPTS all yield PolishResult(None, <reason>) so callers can fall
    back to the deterministic brief.
    """
    provider = llm_provider()
    call = _call_claude if provider == "anthropic" else _call_openai
    key = api_key()
    if not key:
        LOGGER.info("LLM polish skipped: no API key for provider=%s", provider)
        return PolishResult(None, ERROR_NO_API_KEY)

    model = active_model()
    user_prompt = f"JSON:\n{json.dumps(fields, indent=2, ensure_ascii=False)}"
    last_error: Exception | None = None

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            text = (call(api_key=key, model=model, user_prompt=user_prompt) or "").strip()
            if not text:
                return PolishResult(None, ERROR_EMPTY_RESPONSE)
            LOGGER.info("LLM polish succeeded provider=%s model=%s", provider, model)
            return PolishResult(text, None)
        except Exception as exc:  # any SDK/transport error is reported, not raised
            last_error = exc
            LOGGER.warning(
                "LLM polish failed provider=%s on attempt %s/%s: %s",
                provider,
                attempt,
                MAX_ATTEMPTS,
                exc,
            )

    return PolishResult(None, str(last_error) or type(last_error).__name__)


def _call_openai(api_key: str, model: str, user_prompt: str) -> str | None:
    client = OpenAI(api_key=api_key)
    response = client.chat.completions.create(
        model=model,
        temperature=float(os.getenv("OPENAI_TEMPERATURE", DEFAULT_TEMPERATURE)),
        max_completion_tokens=MAX_TOKENS,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ],
    )
    return response.choices[0].message.content


def _call_claude(api_key: str, model: str, user_prompt: str) -> str | None:
    client = anthropic.Anthropic(api_key=api_key)
    LOGGER.debug("Calling Claude model=%s max_tokens=%s", model, MAX_TOKENS)
    response = client.messages.create(
        model=model,
        max_tokens=MAX_TOKENS,
        system=SYSTEM_PROMPT,
        messages=[{"role": "user", "content": user_prompt}],
    )
    return "".join(block.text for block in response.content if getattr(block, "type", "") == "text")

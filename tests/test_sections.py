import re

from sections import (
    ELIGIBILITY_HEADINGS,
    MAX_OUTCOME_ITEMS,
    OUTCOMES_HEADINGS,
    SCOPE_HEADINGS,
    format_list,
    get_section,
)


def _compiled(*patterns: str) -> list[re.Pattern[str]]:
    return [re.compile(pattern) for pattern in patterns]


def test_get_section_inline_headings() -> None:
    text = "Scope: Do X. Expected outcomes: Y."
    assert get_section(text, _compiled("Scope"), _compiled("Expected outcomes")) == "Do X."


def test_get_section_is_case_insensitive() -> None:
    text = "SCOPE\nBuild a testbed.\nEXPECTED OUTCOMES\nMore testbeds."
    assert get_section(text, _compiled("Scope"), _compiled("Expected outcomes")) == "Build a testbed."


def test_get_section_repeatable() -> None:
    text = "Scope: Do X. Expected outcomes: Y."
    starts, ends = _compiled("Scope"), _compiled("Expected outcomes")
    assert get_section(text, starts, ends) == get_section(text, starts, ends)


def test_get_section_absent_when_no_pair_matches() -> None:
    assert get_section("Scope: Do X.", _compiled("Scope"), _compiled("Eligibility")) is None
    assert get_section("", _compiled("Scope"), _compiled("Eligibility")) is None


def test_first_pair_wins_over_tighter_span() -> None:
    text = "Scope: A. Eligibility: B. Expected outcomes: C."
    starts = _compiled("Scope")
    ends = _compiled("Expected outcomes", "Eligibility")
    # the first end synonym is tried first even though Eligibility is nearer
    assert get_section(text, starts, ends) == "A. Eligibility: B."


def test_start_synonyms_tried_in_order() -> None:
    text = "Objective: first. Scope: second. Expected outcomes: third."
    starts = _compiled("Scope", "Objective")
    assert get_section(text, starts, _compiled("Expected outcomes")) == "second."


def test_lazy_match_stops_at_nearest_end() -> None:
    text = "Scope: one. Eligibility: two. Scope: three. Eligibility: four."
    assert get_section(text, _compiled("Scope"), _compiled("Eligibility")) == "one."


def test_empty_span_is_absent() -> None:
    assert get_section("Scope: Expected outcomes:", _compiled("Scope"), _compiled("Expected outcomes")) is None


def test_empty_span_falls_through_to_next_heading() -> None:
    text = "Scope: Expected outcomes: none.\nObjective: Build a testbed.\nExpected outcomes: more."
    starts, ends = _compiled("Scope", "Objective"), _compiled("Expected outcomes")
    assert get_section(text, starts, ends) == "Build a testbed."


def test_heading_tables_on_call_text() -> None:
    text = (
        "Expected Outcome:\n"
        "Project results are expected to contribute to:\n"
        "- resilient supply chains;\n"
        "- open data spaces.\n"
        "Scope:\n"
        "Proposals should develop pilots.\n"
        "Eligibility conditions: described in General Annex B.\n"
        "Evaluation: standard award criteria."
    )
    assert get_section(text, *SCOPE_HEADINGS) == "Proposals should develop pilots."
    assert get_section(text, *OUTCOMES_HEADINGS).startswith("Project results are expected")
    assert get_section(text, *ELIGIBILITY_HEADINGS) == "described in General Annex B."


def test_format_list_none() -> None:
    assert format_list(None) is None


def test_format_list_strips_bullets_and_page_headers() -> None:
    block = (
        "Projects should contribute to:\n"
        "• faster certification;\n"
        "12 of 300\n"
        "– lower emissions;\n"
        "\n"
        "- wider uptake by SMEs."
    )
    assert format_list(block) == [
        "faster certification;",
        "lower emissions;",
        "wider uptake by SMEs.",
    ]


def test_format_list_falls_back_to_paragraphs() -> None:
    block = "First paragraph without stop\n\nSecond paragraph\ncontinues here\n\nThird one"
    assert format_list(block) == [
        "First paragraph without stop",
        "Second paragraph\ncontinues here",
        "Third one",
    ]


def test_format_list_caps_items() -> None:
    block = "\n".join(f"- item {i}" for i in range(20))
    assert len(format_list(block)) == MAX_OUTCOME_ITEMS


def test_format_list_caps_paragraphs() -> None:
    block = "\n\n".join(f"para {i}" for i in range(15))
    assert format_list(block) == [f"para {i}" for i in range(10)]

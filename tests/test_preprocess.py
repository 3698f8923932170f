import pytest

from preprocess import clean


def test_strips_script_and_style_blocks() -> None:
    raw = "<html><script>var x = 1;</script><style>p {}</style><p>Scope of the call</p></html>"
    assert clean(raw) == "Scope of the call"


def test_drops_lines_repeated_three_times() -> None:
    raw = "\n".join([
        "Horizon Europe Work Programme 2025",
        "Scope: quantum sensing.",
        "Horizon Europe Work Programme 2025",
        "Expected outcomes: prototypes.",
        "Horizon Europe Work Programme 2025",
    ])
    assert clean(raw) == "Scope: quantum sensing.\nExpected outcomes: prototypes."


def test_keeps_line_seen_twice() -> None:
    raw = "Deadline\nfirst\nDeadline"
    assert clean(raw) == "Deadline\nfirst\nDeadline"


@pytest.mark.parametrize("line", [
    "EU Funding & Tenders Portal",
    "Sign in",
    "EN",
    "fr",
    "Page 3 of 40",
    "12 / 40",
    "Annex 2",
    "Annex IV - General conditions",
    "https://ec.europa.eu/info/funding-tenders/opportunities/portal",
    "QWERTYUIOPASDFGHJKL",
    "H O R I Z O N",
])
def test_boilerplate_lines_removed(line: str) -> None:
    raw = f"Scope: build things.\n{line}\nEligibility: anyone."
    assert clean(raw) == "Scope: build things.\nEligibility: anyone."


def test_call_id_line_is_not_gibberish() -> None:
    raw = "HORIZON-CL4-2025-DIGITAL-01\nEXPECTED OUTCOMES"
    assert clean(raw) == raw


def test_collapses_whitespace_and_blank_runs() -> None:
    raw = "\n\nScope:\t  first   line\n\n\n\n\nsecond\tline  \n\n"
    assert clean(raw) == "Scope: first line\n\nsecond line"


def test_empty_input() -> None:
    assert clean("") == ""


@pytest.mark.parametrize("raw", [
    "",
    "plain text",
    "a\n\n\n\nb\n\n\n",
    "X\nX\nX\nY\n<b>X</b>\n",
    "a  b\na b\na\tb\nc",
    "&amp;nbsp;Page 1 of 2\n<scr<script></script>ipt>alert()</script>",
    "Header\n\nHeader\n\nHeader\n\nBody\x0cmore\r\nlines end",
    "line one \xa0 with nbsp\n  \n\t\nline two",
])
def test_clean_is_idempotent(raw: str) -> None:
    once = clean(raw)
    assert clean(once) == once

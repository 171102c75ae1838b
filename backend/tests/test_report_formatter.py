"""Tests for plain-text report rendering."""

from models.schemas.match_result import MatchResult
from services.report_formatter import format_report


def _section(report: str, title: str) -> list[str]:
    """Lines under a section heading up to the next blank line."""
    lines = report.splitlines()
    start = lines.index(f"{title}:") + 1
    end = start
    while end < len(lines) and lines[end]:
        end += 1
    return lines[start:end]


def test_full_report_layout():
    result = MatchResult(
        matched=frozenset({"Java"}),
        missing=frozenset({"Spring", "Docker"}),
        match_percentage=100 / 3,
    )
    report = format_report(result, ["First tip.", "Second tip."])
    assert report == (
        "==============================\n"
        "AI Resume Analysis Report\n"
        "==============================\n"
        "\n"
        "Resume Match Score: 33.3%\n"
        "\n"
        "Matched Skills:\n"
        "- Java\n"
        "\n"
        "Missing Skills:\n"
        "- Docker\n"
        "- Spring\n"
        "\n"
        "Suggestions:\n"
        "- First tip.\n"
        "- Second tip.\n"
    )


def test_empty_sections_render_none():
    report = format_report(MatchResult(missing=frozenset({"X"})), [])
    assert _section(report, "Matched Skills") == ["- None"]
    assert _section(report, "Missing Skills") == ["- X"]
    assert _section(report, "Suggestions") == ["- None"]


def test_section_order_is_fixed():
    report = format_report(MatchResult(), [])
    assert (
        report.index("Resume Match Score")
        < report.index("Matched Skills:")
        < report.index("Missing Skills:")
        < report.index("Suggestions:")
    )


def test_none_inputs_render_empty_report():
    report = format_report(None, None)
    assert "Resume Match Score: 0.0%" in report
    assert _section(report, "Matched Skills") == ["- None"]
    assert _section(report, "Suggestions") == ["- None"]


def test_none_suggestions_renders_empty_report():
    report = format_report(MatchResult(matched=frozenset({"SQL"}), match_percentage=100.0), None)
    assert report == format_report(None, None)
    assert "Resume Match Score: 0.0%" in report
    assert _section(report, "Matched Skills") == ["- None"]


def test_title_line():
    assert format_report(None, None).splitlines()[1] == "AI Resume Analysis Report"


def test_suggestion_order_preserved():
    report = format_report(MatchResult(), ["b", "a", "c"])
    assert _section(report, "Suggestions") == ["- b", "- a", "- c"]

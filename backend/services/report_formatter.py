"""Plain-text rendering of a match result and its suggestions."""

from collections.abc import Iterable

from models.schemas.match_result import MatchResult
from services.skill_matcher import sort_skills

REPORT_RULE = "=" * 30
REPORT_TITLE = "AI Resume Analysis Report"


def _section(title: str, lines: Iterable[str]) -> list[str]:
    items = [f"- {line}" for line in lines]
    return [f"{title}:", *(items or ["- None"])]


def format_report(result: MatchResult | None, suggestions: list[str] | None) -> str:
    """Render the fixed-layout report. None for either argument renders an empty report."""
    if result is None or suggestions is None:
        result, suggestions = MatchResult(), []

    lines = [
        REPORT_RULE,
        REPORT_TITLE,
        REPORT_RULE,
        "",
        f"Resume Match Score: {result.match_percentage:.1f}%",
        "",
        *_section("Matched Skills", sort_skills(result.matched)),
        "",
        *_section("Missing Skills", sort_skills(result.missing)),
        "",
        *_section("Suggestions", suggestions),
    ]
    return "\n".join(lines) + "\n"

"""Rule-based resume improvement suggestions.

Output order is fixed: one line per missing skill (alphabetical), followed
by the messages of exactly one score tier from TIER_POLICY.
"""

from dataclasses import dataclass

from models.schemas.match_result import MatchResult
from services.skill_matcher import sort_skills

MISSING_SKILL_TEMPLATE = "Add hands-on experience with {skill} to your resume."


@dataclass(frozen=True)
class SuggestionTier:
    name: str
    upper: float | None  # exclusive; None = unbounded
    messages: tuple[str, ...]

    def contains(self, percentage: float) -> bool:
        return self.upper is None or percentage < self.upper


# Ordered by ascending upper bound; the last tier catches everything else.
TIER_POLICY: tuple[SuggestionTier, ...] = (
    SuggestionTier(
        name="major_alignment",
        upper=50.0,
        messages=(
            "Your resume needs major alignment with job requirements. "
            "Restructure to highlight required skills more prominently.",
            "Consider adding a 'Core Competencies' section to emphasize missing technical areas.",
        ),
    ),
    SuggestionTier(
        name="improve_descriptions",
        upper=80.0,
        messages=(
            "Improve project descriptions to better highlight relevant skills mentioned in the job posting.",
            "Optimize resume keywords to match ATS scanning patterns used by recruiters.",
        ),
    ),
    SuggestionTier(
        name="minor_refinement",
        upper=None,
        messages=(
            "Your resume has strong alignment. Refine formatting and ATS keyword optimization.",
            "Consider adding quantifiable results (e.g., performance improvements) to strengthen impact.",
        ),
    ),
)


def select_tier(percentage: float) -> SuggestionTier:
    """Return the single tier whose band contains *percentage*."""
    for tier in TIER_POLICY:
        if tier.contains(percentage):
            return tier
    return TIER_POLICY[-1]


def suggest(result: MatchResult | None) -> list[str]:
    """Generate ordered suggestions for a match result; None yields []."""
    if result is None:
        return []

    suggestions = [MISSING_SKILL_TEMPLATE.format(skill=skill) for skill in sort_skills(result.missing)]
    suggestions.extend(select_tier(result.match_percentage).messages)
    return suggestions

"""Set-based comparison of resume skills against job skills."""

from collections.abc import Iterable

from models.schemas.match_result import MatchResult


def sort_skills(skills: Iterable[str]) -> list[str]:
    """Deterministic display order: case-insensitive alphabetical."""
    return sorted(skills, key=lambda s: (s.lower(), s))


def match_skills(
    resume_skills: Iterable[str] | None,
    job_skills: Iterable[str] | None,
) -> MatchResult:
    """Compute matched/missing skills and the match percentage.

    None is accepted for either side and treated as an empty set.
    Returns 0.0 percent when the job has no skills.
    """
    resume = frozenset(resume_skills or ())
    job = frozenset(job_skills or ())

    matched = resume & job
    missing = job - resume
    percentage = len(matched) * 100.0 / len(job) if job else 0.0

    return MatchResult(matched=matched, missing=missing, match_percentage=percentage)

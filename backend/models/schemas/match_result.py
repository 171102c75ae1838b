"""Output of the skill matcher: overlap, gap and percentage score."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    """Immutable comparison of resume skills against job skills.

    matched = resume & job, missing = job - resume,
    match_percentage = 100 * |matched| / |job| (0.0 when the job set is empty).
    """
    model_config = ConfigDict(frozen=True)

    matched: frozenset[str] = frozenset()
    missing: frozenset[str] = frozenset()
    match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)

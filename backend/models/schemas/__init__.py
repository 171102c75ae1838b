"""Value objects passed between the analysis stages."""

from models.schemas.match_result import MatchResult
from models.schemas.skill import Skill

__all__ = [
    "MatchResult",
    "Skill",
]

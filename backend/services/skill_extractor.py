"""Vocabulary-based skill extraction.

Normalizes the document into whitespace-separated tokens and reports every
vocabulary skill whose compact key appears as a whole token. No fuzzy
matching, no stemming: "javascript" never yields "Java".
"""

import logging
from functools import lru_cache

from config import settings
from models.schemas.skill import Skill
from services.skill_vocabulary import SkillVocabulary, get_vocabulary, normalize_text

logger = logging.getLogger(__name__)


class SkillExtractor:
    """Extracts canonical skill names from raw text."""

    def __init__(self, vocabulary: SkillVocabulary | None = None) -> None:
        self._vocabulary = vocabulary if vocabulary is not None else get_vocabulary()
        logger.debug("SkillExtractor initialized with %d known skills", self._vocabulary.count())

    def extract(self, text: str) -> set[str]:
        """Return the display names of all vocabulary skills mentioned in *text*.

        Raises TypeError when *text* is None; an empty string yields an empty set.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        if not text:
            return set()

        tokens = set(normalize_text(text).split())
        found = {skill.name for key, skill in self._vocabulary.items() if key in tokens}
        logger.debug("Extracted %d skills from %d characters", len(found), len(text))
        return found

    def skill_info(self, name: str) -> Skill | None:
        return self._vocabulary.lookup(name)

    def known_skills(self) -> set[str]:
        return {skill.name for skill in self._vocabulary.all()}

    def skill_count(self) -> int:
        return self._vocabulary.count()


def extract_skills(text: str) -> set[str]:
    """Extract skills using the shared vocabulary."""
    return SkillExtractor().extract(text)


@lru_cache(maxsize=settings.extraction_cache_size)
def extract_skills_cached(text: str) -> frozenset[str]:
    """Memoized extract_skills(); identical text returns the cached result."""
    return frozenset(extract_skills(text))

"""Skill vocabulary: the canonical set of recognized skills.

Loaded once per process from a JSON configuration file of
``{"skills": [{"name": ..., "category": ...}]}`` entries. A missing or
malformed file, or one yielding no usable entries, degrades to the
built-in FALLBACK_SKILLS list with a warning.

Normalization comes in two flavours:
- normalize_key(): compact lookup key, every non-alphanumeric removed
  ("Spring Boot" -> "springboot", "Node.js" -> "nodejs")
- normalize_text(): document tokenization, runs of non-alphanumerics
  collapsed to a single space ("Node.js, Docker" -> "node js docker")
"""

import logging
import re
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ValidationError

from config import settings
from models.schemas.skill import Skill

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

FALLBACK_CATEGORY = "General"
DEFAULT_JSON_CATEGORY = "Uncategorized"

FALLBACK_SKILLS: tuple[str, ...] = (
    # Languages
    "Java", "Python", "JavaScript", "TypeScript", "C++", "Go", "Rust",
    # Databases
    "SQL", "MongoDB", "PostgreSQL", "MySQL", "Redis",
    # Frameworks
    "Spring", "Spring Boot", "Hibernate", "React", "Angular", "Node.js", "Express",
    # Web
    "HTML", "CSS", "REST", "GraphQL", "JSON", "XML",
    # Infra
    "Docker", "Kubernetes", "AWS", "Azure", "GCP",
    # Tools
    "Git", "GitHub", "GitLab", "Maven", "Gradle",
    "JUnit", "Mockito", "Jest", "Pytest",
    # Process
    "Agile", "Scrum", "TDD", "Linux", "Windows",
    "OOP", "Microservices", "Design Patterns", "SOLID",
)


def normalize_key(name: str) -> str:
    """Lowercase and strip every character outside [a-z0-9]."""
    return _NON_ALNUM.sub("", name.lower())


def normalize_text(text: str) -> str:
    """Lowercase and collapse non-alphanumeric runs into single spaces."""
    return _NON_ALNUM_RUN.sub(" ", text.lower()).strip()


class _SkillEntry(BaseModel):
    name: str
    category: str | None = None


class _SkillsFile(BaseModel):
    skills: list[_SkillEntry]


class SkillVocabulary:
    """Read-only mapping of normalized key -> Skill.

    Duplicate keys keep the first registration; later collisions are
    rejected and logged.
    """

    def __init__(self, skills: dict[str, Skill]) -> None:
        self._by_key = dict(skills)

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, str | None]]) -> "SkillVocabulary":
        """Build a vocabulary from (name, category) pairs."""
        by_key: dict[str, Skill] = {}
        for name, category in entries:
            name = (name or "").strip()
            key = normalize_key(name)
            if not key:
                logger.warning("Skipping skill entry with no usable name: %r", name)
                continue
            existing = by_key.get(key)
            if existing is not None:
                logger.warning(
                    "Rejecting skill %r: key %r already registered by %r",
                    name, key, existing.name,
                )
                continue
            by_key[key] = Skill(name=name, category=category or DEFAULT_JSON_CATEGORY)
        return cls(by_key)

    @classmethod
    def fallback(cls) -> "SkillVocabulary":
        return cls.from_entries((name, FALLBACK_CATEGORY) for name in FALLBACK_SKILLS)

    @classmethod
    def load(cls, source: str | Path | None) -> "SkillVocabulary":
        """Load from a JSON file, degrading to the fallback list on any problem."""
        if source is None:
            logger.info("No skills file configured, using %d fallback skills", len(FALLBACK_SKILLS))
            return cls.fallback()

        path = Path(source)
        logger.debug("Loading skills from %s", path)
        try:
            parsed = _SkillsFile.model_validate_json(path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning("Failed to load skills from %s, using fallback skill set: %s", path, e)
            return cls.fallback()

        vocabulary = cls.from_entries((e.name, e.category) for e in parsed.skills)
        if not vocabulary.count():
            logger.warning("No skills parsed from %s, using fallback skill set", path)
            return cls.fallback()

        logger.info("Loaded %d skills from %s", vocabulary.count(), path)
        return vocabulary

    def lookup(self, token: str) -> Skill | None:
        """Find a skill by any spelling that normalizes to its key."""
        if not token:
            return None
        return self._by_key.get(normalize_key(token))

    def all(self) -> frozenset[Skill]:
        return frozenset(self._by_key.values())

    def count(self) -> int:
        return len(self._by_key)

    def items(self) -> Iterator[tuple[str, Skill]]:
        return iter(self._by_key.items())

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None


# ---------------------------------------------------------------------------
# Process-wide instance, loaded on first use
# ---------------------------------------------------------------------------

_vocabulary: SkillVocabulary | None = None
_vocabulary_lock = threading.Lock()


def get_vocabulary() -> SkillVocabulary:
    """Return the shared vocabulary, loading it exactly once."""
    global _vocabulary
    if _vocabulary is None:
        with _vocabulary_lock:
            if _vocabulary is None:
                _vocabulary = SkillVocabulary.load(settings.skills_file or None)
    return _vocabulary


def reset_vocabulary() -> None:
    """Drop the shared vocabulary so the next access reloads it. Useful for testing."""
    global _vocabulary
    with _vocabulary_lock:
        _vocabulary = None
    # Imported here: skill_extractor depends on this module
    from services.skill_extractor import extract_skills_cached
    extract_skills_cached.cache_clear()

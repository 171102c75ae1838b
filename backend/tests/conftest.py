"""Shared test configuration and fixtures."""

import pytest

from services.skill_vocabulary import SkillVocabulary, reset_vocabulary


@pytest.fixture(autouse=True)
def _fresh_vocabulary():
    """Each test sees a freshly loaded shared vocabulary."""
    reset_vocabulary()
    yield
    reset_vocabulary()


@pytest.fixture
def small_vocabulary() -> SkillVocabulary:
    return SkillVocabulary.from_entries([
        ("Java", "Languages"),
        ("JavaScript", "Languages"),
        ("SQL", "Databases"),
        ("Spring", "Frameworks"),
        ("Spring Boot", "Frameworks"),
        ("Docker", "Cloud"),
        ("Node.js", "Frameworks"),
    ])

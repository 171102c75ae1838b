"""Vocabulary entry: a recognized skill with its canonical display name."""

from pydantic import BaseModel, ConfigDict


class Skill(BaseModel):
    """A named technical competency.

    Frozen so it can live in sets and be shared across threads once the
    vocabulary is built.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    category: str = "General"

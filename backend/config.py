import json
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

DEFAULT_SKILLS_FILE = Path(__file__).resolve().parent / "data" / "skills.json"


class Settings(BaseSettings):
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Skill vocabulary
    skills_file: str = str(DEFAULT_SKILLS_FILE)  # JSON {"skills": [{name, category}]}
    extraction_cache_size: int = 256

    # Request limits
    max_resume_chars: int = 50 * 1024
    max_job_description_chars: int = 50 * 1024
    max_batch_items: int = 20
    rate_limit: str = "10/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as comma-separated string or JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]


settings = Settings()

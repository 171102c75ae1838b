from pydantic import BaseModel, Field, field_validator

from config import settings
from services.text_validation import validate_text


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str = Field(..., description="Job description text")

    @field_validator("resume_text")
    @classmethod
    def _check_resume(cls, value: str) -> str:
        return validate_text(value, "Resume text", settings.max_resume_chars)

    @field_validator("job_description")
    @classmethod
    def _check_job_description(cls, value: str) -> str:
        return validate_text(value, "Job description", settings.max_job_description_chars)


class BatchAnalyzeRequest(BaseModel):
    items: list[QuickAnalyzeRequest] = Field(
        ..., min_length=1, max_length=settings.max_batch_items,
        description="Resume/job pairs, analysed independently",
    )

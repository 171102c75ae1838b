from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    match_percentage: float = 0.0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    resume_skills: list[str] = []
    job_skills: list[str] = []
    suggestions: list[str] = []
    report: str = ""


class BatchAnalysisResponse(BaseModel):
    results: list[AnalysisResponse] = []
    count: int = 0


class SkillEntry(BaseModel):
    name: str
    category: str


class SkillListResponse(BaseModel):
    skills: list[SkillEntry] = []
    count: int = 0

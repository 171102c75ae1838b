from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import BatchAnalyzeRequest, QuickAnalyzeRequest
from models.responses import (
    AnalysisResponse,
    BatchAnalysisResponse,
    SkillEntry,
    SkillListResponse,
)
from services import resume_analyzer
from services.skill_vocabulary import get_vocabulary

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "skills_loaded": get_vocabulary().count(),
    }


@router.get("/skills", response_model=SkillListResponse)
async def list_skills():
    skills = sorted(get_vocabulary().all(), key=lambda s: (s.name.lower(), s.name))
    return SkillListResponse(
        skills=[SkillEntry(name=s.name, category=s.category) for s in skills],
        count=len(skills),
    )


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return resume_analyzer.analyze(body.resume_text, body.job_description)


@router.post("/analyze/batch", response_model=BatchAnalysisResponse)
@limiter.limit(settings.rate_limit)
def analyze_batch(request: Request, body: BatchAnalyzeRequest):
    results = [
        resume_analyzer.analyze(item.resume_text, item.job_description)
        for item in body.items
    ]
    return BatchAnalysisResponse(results=results, count=len(results))

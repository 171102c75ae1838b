"""Orchestrator: resume vs. job description skill analysis.

Pipeline:
1. Skill extraction from both texts (vocabulary token matching, memoized)
2. Set matching -> matched / missing / percentage
3. Rule-based suggestions
4. Plain-text report
"""

import logging

from models.responses import AnalysisResponse
from services.report_formatter import format_report
from services.skill_extractor import extract_skills_cached
from services.skill_matcher import match_skills, sort_skills
from services.suggestion_engine import suggest

logger = logging.getLogger(__name__)


def analyze(resume_text: str, job_description: str) -> AnalysisResponse:
    """Run the full analysis pipeline for one resume/job pair."""
    # --- Stage 1: Extraction ---
    resume_skills = extract_skills_cached(resume_text)
    job_skills = extract_skills_cached(job_description)

    # --- Stage 2: Matching ---
    result = match_skills(resume_skills, job_skills)

    # --- Stage 3: Suggestions ---
    suggestions = suggest(result)

    # --- Stage 4: Report ---
    report = format_report(result, suggestions)

    logger.info(
        "Analysis complete: %d/%d job skills matched (%.1f%%)",
        len(result.matched), len(job_skills), result.match_percentage,
    )

    return AnalysisResponse(
        match_percentage=round(result.match_percentage, 1),
        matched_skills=sort_skills(result.matched),
        missing_skills=sort_skills(result.missing),
        resume_skills=sort_skills(resume_skills),
        job_skills=sort_skills(job_skills),
        suggestions=suggestions,
        report=report,
    )

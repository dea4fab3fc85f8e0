from __future__ import annotations

from pydantic import BaseModel, Field

from resume_feedback.core.config import settings
from resume_feedback.schemas.feedback import Report


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(default="", max_length=settings.max_resume_chars)
    job_title: str | None = Field(default=None, max_length=200)
    job_description: str | None = Field(default=None, max_length=settings.max_resume_chars)


class AnalyzeResponse(BaseModel):
    feedback: Report
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)

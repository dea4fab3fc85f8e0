from fastapi import APIRouter, Request

from resume_feedback.core.rate_limit import rate_limit
from resume_feedback.core.scoring import get_scoring_tables
from resume_feedback.schemas.analysis import AnalyzeRequest, AnalyzeResponse
from resume_feedback.schemas.feedback import AnalysisInput
from resume_feedback.services.feedback_service import analyze_request

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    summary="Analyze Resume",
    description="Score extracted resume text and return section feedback, ATS tips and highlights.",
)
@rate_limit()
def analyze_resume(request: Request, payload: AnalyzeRequest):
    _ = request
    return analyze_request(
        AnalysisInput(
            text=payload.resume_text,
            job_title=payload.job_title,
            job_description=payload.job_description,
        ),
        get_scoring_tables(),
    )

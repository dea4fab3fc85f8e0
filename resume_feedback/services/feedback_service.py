from __future__ import annotations

import logging
import re

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features import (
    NormalizedText,
    analyze_contact,
    analyze_education,
    analyze_experience,
    analyze_formatting,
    analyze_skills,
    analyze_summary,
    normalize_text,
)
from resume_feedback.schemas.analysis import AnalyzeResponse
from resume_feedback.schemas.feedback import (
    AnalysisInput,
    Category,
    Report,
    SectionResult,
    SectionResults,
    Tip,
)

logger = logging.getLogger(__name__)

ATS_TIP_LIMIT = 5
GOOD_TIP_THRESHOLD = 80
DETAIL_TIP_EXPLANATION = "This is important for professional presentation and ATS compatibility"

# Characters outside this set (emoji, glyph bullets, box drawing) trip older ATS parsers.
_NON_ATS_CHAR_RE = re.compile(r"""[^A-Za-z0-9_\s.,;:!?@#$%&*()\[\]{}|\\/"'-]""")

_GENERIC_RECOMMENDATIONS = (
    "Use consistent formatting and bullet points for easy readability",
    "Keep your resume to 1-2 pages maximum",
    "Proofread carefully for grammar and spelling errors",
)

LAST_RESORT_JSON = (
    '{"overallScore": 0, "ats": {"score": 0, "tips": []}, '
    '"toneAndStyle": {"score": 0, "tips": []}, "content": {"score": 0, "tips": []}, '
    '"structure": {"score": 0, "tips": []}, "skills": {"score": 0, "tips": []}}'
)


def run_analyzers(
    text: NormalizedText,
    job_description: str | None = None,
    tables: ScoringTables = DEFAULT_TABLES,
) -> SectionResults:
    return SectionResults(
        contact=analyze_contact(text, tables),
        summary=analyze_summary(text, tables),
        experience=analyze_experience(text, tables),
        education=analyze_education(text, tables),
        skills=analyze_skills(text, job_description, tables),
        formatting=analyze_formatting(text, tables),
    )


def compute_overall_score(results: SectionResults) -> int:
    """Mean of the six section scores, rounded half up."""
    scores = results.scores()
    return (2 * sum(scores) + len(scores)) // (2 * len(scores))


def calculate_ats_score(
    text: NormalizedText,
    overall_score: int,
    tables: ScoringTables = DEFAULT_TABLES,
) -> int:
    score = overall_score
    if all(section in text.lower for section in tables.standard_sections):
        score += 5
    if _NON_ATS_CHAR_RE.search(text.original) is None:
        score += 5
    return min(score, 100)


def generate_recommendations(
    results: SectionResults,
    job_title: str | None = None,
    job_description: str | None = None,
) -> list[str]:
    recommendations: list[str] = []

    if results.contact.score < 80:
        recommendations.append(
            "Add complete contact information including email, phone, and LinkedIn profile"
        )
    if results.experience.score < 70:
        recommendations.append(
            "Use more action verbs and quantify your achievements with specific numbers and percentages"
        )
    if results.skills.score < 70:
        recommendations.append(
            "Expand your skills section with both technical and soft skills relevant to your field"
        )
    if job_description:
        recommendations.append(
            f"Tailor your resume to match keywords from the {job_title or 'target'} position"
        )

    recommendations.extend(_GENERIC_RECOMMENDATIONS)
    return recommendations


def section_to_tips(section: SectionResult) -> list[Tip]:
    kind = "good" if section.score >= GOOD_TIP_THRESHOLD else "improve"
    tips = [Tip(kind=kind, message=section.feedback, explanation=section.feedback)]

    for detail in section.details:
        if detail.startswith("✓") or detail.startswith("•"):
            continue
        tips.append(
            Tip(
                kind="improve",
                message=detail.replace("✗ ", "", 1),
                explanation=DETAIL_TIP_EXPLANATION,
            )
        )
    return tips


def identify_strengths(results: SectionResults) -> list[str]:
    strengths: list[str] = []
    if results.contact.score >= 80:
        strengths.append("Complete professional contact information")
    if results.experience.score >= 80:
        strengths.append("Strong work experience with quantified achievements")
    if results.skills.score >= 80:
        strengths.append("Comprehensive skills section")
    if results.formatting.score >= 80:
        strengths.append("Well-organized and professional formatting")
    return strengths or ["Resume structure follows professional standards"]


def identify_areas_for_improvement(results: SectionResults) -> list[str]:
    areas: list[str] = []
    if results.contact.score < 70:
        areas.append("Contact information completeness")
    if results.summary.score < 70:
        areas.append("Professional summary development")
    if results.experience.score < 70:
        areas.append("Work experience presentation")
    if results.skills.score < 70:
        areas.append("Skills section organization")
    if results.formatting.score < 70:
        areas.append("Overall formatting and structure")
    return areas


def build_report(
    results: SectionResults,
    text: NormalizedText,
    job_title: str | None = None,
    job_description: str | None = None,
    tables: ScoringTables = DEFAULT_TABLES,
) -> Report:
    overall_score = compute_overall_score(results)
    recommendations = generate_recommendations(results, job_title, job_description)

    return Report(
        overall_score=overall_score,
        ats=Category(
            score=calculate_ats_score(text, overall_score, tables),
            tips=[Tip(kind="improve", message=item) for item in recommendations[:ATS_TIP_LIMIT]],
        ),
        tone_and_style=Category(score=results.summary.score, tips=section_to_tips(results.summary)),
        content=Category(score=results.experience.score, tips=section_to_tips(results.experience)),
        structure=Category(score=results.formatting.score, tips=section_to_tips(results.formatting)),
        skills=Category(score=results.skills.score, tips=section_to_tips(results.skills)),
    )


def fallback_report() -> Report:
    """Fixed report returned when the normal pipeline fails; independent of input."""
    return Report(
        overall_score=65,
        ats=Category(
            score=60,
            tips=[
                Tip(kind="improve", message="Add more relevant keywords for better ATS compatibility"),
                Tip(kind="improve", message="Use standard section headings like 'Experience' and 'Education'"),
            ],
        ),
        tone_and_style=Category(
            score=70,
            tips=[
                Tip(
                    kind="improve",
                    message="Add a professional summary section",
                    explanation="A compelling summary helps recruiters quickly understand your value proposition",
                )
            ],
        ),
        content=Category(
            score=60,
            tips=[
                Tip(
                    kind="improve",
                    message="Add quantified achievements to your experience section",
                    explanation="Numbers and metrics make your accomplishments more impactful",
                )
            ],
        ),
        structure=Category(
            score=65,
            tips=[
                Tip(
                    kind="improve",
                    message="Ensure consistent formatting throughout",
                    explanation="Consistent formatting improves readability and professionalism",
                )
            ],
        ),
        skills=Category(
            score=65,
            tips=[
                Tip(
                    kind="improve",
                    message="Expand your skills section with relevant technologies",
                    explanation="Include both technical and soft skills relevant to your target role",
                )
            ],
        ),
    )


def _run_pipeline(payload: AnalysisInput, tables: ScoringTables) -> tuple[Report, SectionResults]:
    text = normalize_text(payload.text)
    logger.info(
        "local_analysis_start lines=%s words=%s has_job_description=%s",
        len(text.lines),
        len(text.words),
        bool(payload.job_description),
    )
    results = run_analyzers(text, payload.job_description, tables)
    report = build_report(results, text, payload.job_title, payload.job_description, tables)
    logger.info(
        "local_analysis_complete overall_score=%s ats_score=%s",
        report.overall_score,
        report.ats.score,
    )
    return report, results


def analyze_report(
    text: str,
    job_title: str | None = None,
    job_description: str | None = None,
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> Report:
    try:
        payload = AnalysisInput(text=text, job_title=job_title, job_description=job_description)
        report, _ = _run_pipeline(payload, tables)
        return report
    except Exception:
        logger.exception("local_analysis_failed")
        return fallback_report()


def analyze(
    text: str,
    job_title: str | None = None,
    job_description: str | None = None,
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> str:
    """Score résumé text and return the feedback report as indented JSON.

    Never raises: any failure inside the pipeline yields the fallback report,
    and a failure while serializing that yields a minimal all-zero report.
    """
    try:
        return analyze_report(text, job_title, job_description, tables=tables).to_json()
    except Exception:
        logger.exception("feedback_serialization_failed")
    try:
        return fallback_report().to_json()
    except Exception:
        logger.exception("fallback_report_failed")
        return LAST_RESORT_JSON


def analyze_request(payload: AnalysisInput, tables: ScoringTables = DEFAULT_TABLES) -> AnalyzeResponse:
    try:
        report, results = _run_pipeline(payload, tables)
    except Exception:
        logger.exception("local_analysis_failed")
        return AnalyzeResponse(feedback=fallback_report())

    return AnalyzeResponse(
        feedback=report,
        strengths=identify_strengths(results),
        areas_for_improvement=identify_areas_for_improvement(results),
    )

from __future__ import annotations

import re

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText, contains_any, count_present, tiered_feedback
from resume_feedback.schemas.feedback import SectionResult

# Leading or trailing whitespace leaves empty tokens, which match any résumé.
_WHITESPACE_RE = re.compile(r"\s+")


def count_job_keyword_matches(resume_lower: str, job_description: str | None) -> int:
    """Count job-description tokens found in the résumé; repeated tokens count each time."""
    if not job_description:
        return 0
    tokens = _WHITESPACE_RE.split(job_description.lower())
    return sum(1 for token in tokens if token in resume_lower)


def analyze_skills(
    text: NormalizedText,
    job_description: str | None = None,
    tables: ScoringTables = DEFAULT_TABLES,
) -> SectionResult:
    score = 0
    if contains_any(text.lower, tables.skills_keywords):
        score += 40
    score += min(count_present(text.lower, tables.technical_skills) * 10, 30)
    score += min(count_present(text.lower, tables.soft_skills) * 6, 30)
    if job_description:
        score += min(count_job_keyword_matches(text.lower, job_description) * 2, 20)
    score = min(score, 100)

    return SectionResult(
        score=score,
        feedback=tiered_feedback(
            score,
            "Comprehensive skills section",
            "Good skills coverage",
            "Expand and organize skills section",
        ),
    )

from __future__ import annotations

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText, contains_any
from resume_feedback.schemas.feedback import SectionResult


def analyze_education(text: NormalizedText, tables: ScoringTables = DEFAULT_TABLES) -> SectionResult:
    has_education = contains_any(text.lower, tables.education_keywords)
    has_degree = contains_any(text.lower, tables.degree_keywords)

    # "bachelor", "master" and "phd" sit in both default lists, so they always
    # score 100; "doctorate" or "associate" alone add the bonus to the 30 base.
    score = 80 if has_education else 30
    if has_degree:
        score += 20

    return SectionResult(
        score=min(score, 100),
        feedback="Education information present" if has_education else "Add educational background",
    )

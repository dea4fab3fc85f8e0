from __future__ import annotations

import re
from functools import lru_cache

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText, contains_any
from resume_feedback.schemas.feedback import SectionResult

OPENING_LINE_COUNT = 5
OPENING_MIN_CHARS = 100


@lru_cache(maxsize=32)
def _descriptive_pattern(terms: tuple[str, ...]) -> re.Pattern[str] | None:
    if not terms:
        return None
    return re.compile(r"\b(" + "|".join(re.escape(term) for term in terms) + r")\b", re.ASCII)


def analyze_summary(text: NormalizedText, tables: ScoringTables = DEFAULT_TABLES) -> SectionResult:
    opening = " ".join(text.lines[:OPENING_LINE_COUNT]).lower()
    pattern = _descriptive_pattern(tables.descriptive_terms)

    score = 0
    if contains_any(text.lower, tables.summary_keywords):
        score += 50
    if pattern is not None and pattern.search(opening):
        score += 30
    if len(opening) > OPENING_MIN_CHARS:
        score += 20
    score = min(score, 100)

    if score > 70:
        feedback = "Good professional summary"
    elif score > 40:
        feedback = "Basic summary present"
    else:
        feedback = "Add compelling professional summary"
    return SectionResult(score=score, feedback=feedback)

from __future__ import annotations

import re

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText, contains_any, count_present, tiered_feedback
from resume_feedback.schemas.feedback import SectionResult

QUANTIFIER_RE = re.compile(r"\b[0-9]+%|\$[0-9]+|[0-9]+\+|increased by [0-9]+|reduced by [0-9]+", re.ASCII)


def count_quantified_achievements(original: str) -> int:
    """Count every metric-like match in the original (case-preserved) text."""
    return sum(1 for _ in QUANTIFIER_RE.finditer(original))


def analyze_experience(text: NormalizedText, tables: ScoringTables = DEFAULT_TABLES) -> SectionResult:
    verb_count = count_present(text.lower, tables.action_verbs)
    quantified = count_quantified_achievements(text.original)

    score = 0
    if contains_any(text.lower, tables.experience_keywords):
        score += 40
    score += min(verb_count * 5, 30)
    score += min(quantified * 10, 30)
    score = min(score, 100)

    details: list[str] = []
    if verb_count > 3:
        details.append(f"✓ Uses {verb_count} strong action verbs")
    if quantified > 0:
        details.append(f"✓ Includes {quantified} quantified achievements")

    return SectionResult(
        score=score,
        feedback=tiered_feedback(
            score,
            "Excellent experience section",
            "Good experience details",
            "Enhance experience with achievements",
        ),
        details=tuple(details),
    )

from __future__ import annotations

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText, tiered_feedback
from resume_feedback.schemas.feedback import SectionResult

BASE_SCORE = 50


def count_bullets(original: str, glyphs: tuple[str, ...]) -> int:
    glyph_set = set(glyphs)
    return sum(1 for char in original if char in glyph_set)


def average_line_length(lines: tuple[str, ...]) -> float | None:
    if not lines:
        return None
    return sum(len(line) for line in lines) / len(lines)


def analyze_formatting(text: NormalizedText, tables: ScoringTables = DEFAULT_TABLES) -> SectionResult:
    score = BASE_SCORE
    if count_bullets(text.original, tables.bullet_glyphs) > 3:
        score += 20
    if 10 < len(text.lines) < 100:
        score += 20
    mean_length = average_line_length(text.lines)
    if mean_length is not None and 20 < mean_length < 80:
        score += 10
    score = min(score, 100)

    return SectionResult(
        score=score,
        feedback=tiered_feedback(
            score,
            "Well-formatted resume",
            "Good structure",
            "Improve formatting and organization",
        ),
    )

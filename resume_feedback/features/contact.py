from __future__ import annotations

import re

from resume_feedback.core.scoring import DEFAULT_TABLES, ScoringTables
from resume_feedback.features.text import NormalizedText
from resume_feedback.schemas.feedback import SectionResult

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII)
PHONE_RE = re.compile(r"(\+?[0-9]{1,3}[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/|linkedin\.com/pub/", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/|github\.io", re.IGNORECASE)

EMAIL_POINTS = 30
PHONE_POINTS = 25
LINKEDIN_POINTS = 25
GITHUB_POINTS = 20


def analyze_contact(text: NormalizedText, tables: ScoringTables = DEFAULT_TABLES) -> SectionResult:
    _ = tables
    has_email = EMAIL_RE.search(text.original) is not None
    has_phone = PHONE_RE.search(text.original) is not None
    has_linkedin = LINKEDIN_RE.search(text.original) is not None
    has_github = GITHUB_RE.search(text.original) is not None

    score = 0
    details: list[str] = []

    if has_email:
        score += EMAIL_POINTS
        details.append("✓ Email address found")
    else:
        details.append("✗ Add professional email address")

    if has_phone:
        score += PHONE_POINTS
        details.append("✓ Phone number found")
    else:
        details.append("✗ Add phone number")

    if has_linkedin:
        score += LINKEDIN_POINTS
        details.append("✓ LinkedIn profile found")
    else:
        details.append("✗ Add LinkedIn profile URL")

    # GitHub is optional, so its absence is a neutral note rather than a gap.
    if has_github:
        score += GITHUB_POINTS
        details.append("✓ GitHub profile found")
    else:
        details.append("• Consider adding GitHub profile (if relevant)")

    feedback = (
        "Strong contact information"
        if has_email and has_phone
        else "Missing essential contact details"
    )
    return SectionResult(score=min(score, 100), feedback=feedback, details=tuple(details))

from .contact import analyze_contact
from .education import analyze_education
from .experience import analyze_experience, count_quantified_achievements
from .formatting import analyze_formatting, average_line_length, count_bullets
from .skills import analyze_skills, count_job_keyword_matches
from .summary import analyze_summary
from .text import NormalizedText, normalize_text

__all__ = [
    "NormalizedText",
    "normalize_text",
    "analyze_contact",
    "analyze_summary",
    "analyze_experience",
    "count_quantified_achievements",
    "analyze_education",
    "analyze_skills",
    "count_job_keyword_matches",
    "analyze_formatting",
    "average_line_length",
    "count_bullets",
]

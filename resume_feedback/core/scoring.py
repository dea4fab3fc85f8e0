from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from resume_feedback.core.config import settings


@dataclass(frozen=True)
class ScoringTables:
    """Keyword tables consulted by the section analyzers.

    Every table is a tuple so one instance can be shared freely between
    concurrent analyses.
    """

    summary_keywords: tuple[str, ...] = ("summary", "profile", "objective", "about", "overview")
    descriptive_terms: tuple[str, ...] = (
        "experienced",
        "skilled",
        "professional",
        "dedicated",
        "passionate",
        "results-driven",
    )
    experience_keywords: tuple[str, ...] = (
        "experience",
        "employment",
        "work history",
        "professional experience",
    )
    action_verbs: tuple[str, ...] = (
        "achieved",
        "managed",
        "led",
        "developed",
        "implemented",
        "created",
        "improved",
        "increased",
        "reduced",
        "designed",
    )
    education_keywords: tuple[str, ...] = (
        "education",
        "degree",
        "university",
        "college",
        "bachelor",
        "master",
        "phd",
        "certification",
    )
    degree_keywords: tuple[str, ...] = ("bachelor", "master", "phd", "doctorate", "associate")
    skills_keywords: tuple[str, ...] = ("skills", "technologies", "competencies", "proficiencies")
    technical_skills: tuple[str, ...] = (
        "python",
        "javascript",
        "java",
        "react",
        "node",
        "sql",
        "aws",
        "docker",
        "git",
    )
    soft_skills: tuple[str, ...] = (
        "leadership",
        "communication",
        "teamwork",
        "problem solving",
        "analytical",
    )
    bullet_glyphs: tuple[str, ...] = ("•", "·", "▪", "▫", "◦", "‣", "⁃")
    standard_sections: tuple[str, ...] = ("experience", "education", "skills")


DEFAULT_TABLES = ScoringTables()

_TABLE_NAMES = frozenset(field.name for field in fields(ScoringTables))
_SCORING_TABLES_CACHE: ScoringTables | None = None


def _coerce_table(path: Path, key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RuntimeError(
            f"Invalid scoring config '{path}': '{key}' must be a list of strings."
        )
    return tuple(item.strip().lower() for item in value if item.strip())


def load_scoring_tables(path: str | Path) -> ScoringTables:
    """Build tables from a YAML mapping; keys the file omits keep their defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise RuntimeError(f"Scoring config not found at '{config_path}'.")

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read scoring config '{config_path}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in scoring config '{config_path}': {exc}"
        ) from exc

    if parsed is None:
        return DEFAULT_TABLES
    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid scoring config '{config_path}': expected a top-level mapping."
        )

    unknown = sorted(str(key) for key in parsed if key not in _TABLE_NAMES)
    if unknown:
        raise RuntimeError(
            f"Invalid scoring config '{config_path}': unknown tables {', '.join(unknown)}."
        )

    overrides = {key: _coerce_table(config_path, key, value) for key, value in parsed.items()}
    return replace(DEFAULT_TABLES, **overrides)


def get_scoring_tables() -> ScoringTables:
    """Return the tables configured via SCORING_CONFIG_PATH, cached after first load."""
    global _SCORING_TABLES_CACHE

    if _SCORING_TABLES_CACHE is not None:
        return _SCORING_TABLES_CACHE

    if settings.scoring_config_path:
        _SCORING_TABLES_CACHE = load_scoring_tables(settings.scoring_config_path)
    else:
        _SCORING_TABLES_CACHE = DEFAULT_TABLES
    return _SCORING_TABLES_CACHE

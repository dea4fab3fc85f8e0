from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedText:
    original: str
    lower: str
    lines: tuple[str, ...]
    words: tuple[str, ...]


def normalize_text(text: str | None) -> NormalizedText:
    """Split extracted résumé text once so every analyzer shares the same view.

    Lines keep their original casing and surrounding whitespace; only lines
    that are blank after trimming are dropped.
    """
    original = text or ""
    lines = tuple(line for line in original.split("\n") if line.strip())
    return NormalizedText(
        original=original,
        lower=original.lower(),
        lines=lines,
        words=tuple(original.split()),
    )


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def count_present(text: str, keywords: tuple[str, ...]) -> int:
    return sum(1 for keyword in keywords if keyword in text)


def tiered_feedback(score: int, high: str, mid: str, low: str) -> str:
    if score > 80:
        return high
    if score > 60:
        return mid
    return low

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TipKind = Literal["good", "improve"]


class AnalysisInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str | None = ""
    job_title: str | None = None
    job_description: str | None = None


class SectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    feedback: str
    details: tuple[str, ...] = ()


class SectionResults(BaseModel):
    """The six analyzer outputs, one named field per résumé section."""

    model_config = ConfigDict(frozen=True)

    contact: SectionResult
    summary: SectionResult
    experience: SectionResult
    education: SectionResult
    skills: SectionResult
    formatting: SectionResult

    def scores(self) -> tuple[int, ...]:
        return (
            self.contact.score,
            self.summary.score,
            self.experience.score,
            self.education.score,
            self.skills.score,
            self.formatting.score,
        )


class Tip(BaseModel):
    kind: TipKind
    message: str
    explanation: str | None = None


class Category(BaseModel):
    score: int = Field(ge=0, le=100)
    tips: list[Tip] = Field(default_factory=list)


class Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_score: int = Field(ge=0, le=100, alias="overallScore")
    ats: Category
    tone_and_style: Category = Field(alias="toneAndStyle")
    content: Category
    structure: Category
    skills: Category

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

"""Typed result shapes for the structured operations.

Each model doubles as the validation schema for the model's JSON output, so
a syntactically valid document with missing or mistyped fields is rejected
rather than half-filled.  Wire names are camelCase; Python attributes are
snake_case.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Models answer with whole or fractional numbers; either is kept as sent.
Number = int | float
Percent = Annotated[Number, Field(ge=0, le=100)]


class _Result(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ResumeOptimization(_Result):
    suggestions: list[str]
    score: Percent
    keywords: list[str]


class JobMatchAnalysis(_Result):
    overall_score: Percent
    skills_match: Percent
    experience_match: Percent
    education_match: Percent
    missing_skills: list[str]
    matching_skills: list[str]
    reasoning: str


class InterviewQuestion(_Result):
    question: str
    suggested_answer: str
    tips: str
    category: str
    difficulty: str

    @field_validator("category", "difficulty")
    @classmethod
    def _normalise(cls, v: str) -> str:
        return v.strip().lower()


class AnswerEvaluation(_Result):
    score: Annotated[Number, Field(ge=1, le=10)]
    feedback: str
    improvements: list[str]


class SkillsGapAnalysis(_Result):
    missing_skills: list[str]
    learning_path: list[str]
    resources: list[str]
    timeline: str


class SalaryRange(_Result):
    min: Annotated[Number, Field(ge=0)]
    max: Annotated[Number, Field(ge=0)]
    median: Annotated[Number, Field(ge=0)]

    @model_validator(mode="after")
    def _ordered(self) -> SalaryRange:
        if not self.min <= self.median <= self.max:
            msg = f"salary range out of order: {self.min} / {self.median} / {self.max}"
            raise ValueError(msg)
        return self


class SalaryInsights(_Result):
    salary_range: SalaryRange
    factors: list[str]
    negotiation_tips: list[str]


class ProsAndCons(_Result):
    pros: list[str]
    cons: list[str]


class CompanyAnalysis(_Result):
    overview: str
    culture: str
    interview_tips: list[str]
    questions_to_ask: list[str]
    pros_and_cons: ProsAndCons

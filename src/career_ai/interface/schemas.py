"""Pydantic request / response DTOs for the API boundary.

Field names on the wire are camelCase to match the front-end client.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from career_ai.domain.entities import ChatRole, InterviewCategory
from career_ai.domain.results import InterviewQuestion

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ────────────────────────────────────────────────────────────────


class ChatMessageBody(_Body):
    role: ChatRole
    content: str


class ChatBody(_Body):
    """Request body for ``POST /api/ai/chat``."""

    messages: list[ChatMessageBody] = Field(min_length=1)
    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: int = Field(default=2000, gt=0)


class ResumeSummaryBody(_Body):
    experience: list[Any] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    target_role: str | None = None


class ResumeOptimizeBody(_Body):
    resume: Any
    job_description: str | None = None


class EnhanceBulletsBody(_Body):
    bullets: list[str] = Field(min_length=1)
    role: str
    company: str


class CoverLetterBody(_Body):
    job_title: NonBlank
    company: NonBlank
    job_description: str | None = None
    resume: Any = None
    tone: str = "professional"


class JobMatchBody(_Body):
    resume: Any
    job: Any


class InterviewQuestionsBody(_Body):
    job_title: NonBlank
    company: str | None = None
    interview_type: InterviewCategory = InterviewCategory.GENERAL
    skills: list[str] | None = None
    experience_level: str | None = None
    count: int = Field(default=10, ge=1, le=50)


class EvaluateAnswerBody(_Body):
    question: str
    answer: str
    context: str | None = None


class SkillsGapBody(_Body):
    current_skills: list[str]
    target_role: str
    industry: str | None = None


class SalaryInsightsBody(_Body):
    job_title: str
    location: str
    experience_level: str
    skills: list[str] | None = None
    industry: str | None = None


class CompanyAnalyzeBody(_Body):
    company_name: NonBlank
    role: str | None = None


class NetworkingMessageBody(_Body):
    purpose: str
    recipient_info: str
    your_background: str | None = None
    platform: str = "LinkedIn"


class FollowUpEmailBody(_Body):
    context: str
    recipient_name: str | None = None
    recipient_role: str | None = None
    tone: str = "professional"


# ── Responses ───────────────────────────────────────────────────────────────


class ChatResponse(BaseModel):
    response: str


class SummaryResponse(BaseModel):
    summary: str


class EnhancedBulletsResponse(BaseModel):
    enhanced: list[str]


class CoverLetterResponse(BaseModel):
    content: str


class InterviewQuestionsResponse(BaseModel):
    questions: list[InterviewQuestion]


class MessageResponse(BaseModel):
    message: str


class EmailResponse(BaseModel):
    email: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str

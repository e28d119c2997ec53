"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ChatRole(str, Enum):
    """Author of a single chat turn."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class InterviewCategory(str, Enum):
    """Mutually exclusive interview-question generation modes."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SITUATIONAL = "situational"
    GENERAL = "general"


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One turn in a conversation sent to the provider."""

    role: ChatRole
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True, slots=True)
class ChatOptions:
    """Tunable generation parameters, forwarded to the provider as-is."""

    temperature: float = 0.7
    max_tokens: int = 2000
    timeout: float | None = None  # seconds; None = configured default


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Model output that could not be turned into the requested shape."""

    reason: str
    excerpt: str


# ── Feature requests ────────────────────────────────────────────────────────
#
# One input bundle per façade operation.  Résumé and job payloads are the
# caller's JSON documents and are rendered into prompts verbatim.


@dataclass(frozen=True, slots=True)
class ExperienceSummaryRequest:
    experience: list[Any]
    skills: list[str]
    target_role: str | None = None


@dataclass(frozen=True, slots=True)
class ResumeOptimizationRequest:
    resume: Any
    job_description: str | None = None


@dataclass(frozen=True, slots=True)
class BulletEnhancementRequest:
    bullets: list[str]
    role: str
    company: str


@dataclass(frozen=True, slots=True)
class CoverLetterRequest:
    job_title: str
    company: str
    job_description: str | None = None
    resume: Any = None
    tone: str = "professional"


@dataclass(frozen=True, slots=True)
class JobMatchRequest:
    resume: Any
    job: Any


@dataclass(frozen=True, slots=True)
class InterviewQuestionsRequest:
    job_title: str
    category: InterviewCategory = InterviewCategory.GENERAL
    company: str | None = None
    skills: list[str] | None = None
    experience_level: str | None = None
    count: int = 10


@dataclass(frozen=True, slots=True)
class AnswerEvaluationRequest:
    question: str
    answer: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class SkillsGapRequest:
    current_skills: list[str]
    target_role: str
    industry: str | None = None


@dataclass(frozen=True, slots=True)
class SalaryInsightsRequest:
    job_title: str
    location: str
    experience_level: str
    skills: list[str] | None = None
    industry: str | None = None


@dataclass(frozen=True, slots=True)
class CompanyAnalysisRequest:
    company_name: str
    role: str | None = None


@dataclass(frozen=True, slots=True)
class NetworkingMessageRequest:
    purpose: str
    recipient_info: str
    your_background: str | None = None
    platform: str = "LinkedIn"


@dataclass(frozen=True, slots=True)
class FollowUpEmailRequest:
    context: str
    recipient_name: str | None = None
    recipient_role: str | None = None
    tone: str = "professional"

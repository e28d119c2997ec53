"""Career AI service — the structured-operation façade.

One coroutine per feature.  Each renders its prompt, makes a single
transport call with a role-setting system persona, and decodes the reply
into a typed result.  Bad model output never escapes: it is replaced by the
operation's fallback, which is an instance of the same result type.
Configuration and transport errors are not caught here.

The service holds no per-call state, so one instance is shared by every
request handler.
"""

from __future__ import annotations

import logging
from typing import Sequence

from career_ai.domain.entities import (
    AnswerEvaluationRequest,
    BulletEnhancementRequest,
    ChatMessage,
    ChatOptions,
    ChatRole,
    CompanyAnalysisRequest,
    CoverLetterRequest,
    DecodeFailure,
    ExperienceSummaryRequest,
    FollowUpEmailRequest,
    InterviewCategory,
    InterviewQuestionsRequest,
    JobMatchRequest,
    NetworkingMessageRequest,
    ResumeOptimizationRequest,
    SalaryInsightsRequest,
    SkillsGapRequest,
)
from career_ai.domain.ports.chat_transport import ChatTransport
from career_ai.domain.results import (
    AnswerEvaluation,
    CompanyAnalysis,
    InterviewQuestion,
    JobMatchAnalysis,
    ProsAndCons,
    ResumeOptimization,
    SalaryInsights,
    SalaryRange,
    SkillsGapAnalysis,
)
from career_ai.services import prompts
from career_ai.services.normalizer import decode

logger = logging.getLogger(__name__)

_INTERVIEW_OPTIONS = ChatOptions(max_tokens=4000)

# ── Fallbacks ───────────────────────────────────────────────────────────────
#
# Some fallbacks carry the raw reply (or the caller's input) so the user
# still sees something useful.


def resume_optimization_fallback(raw: str) -> ResumeOptimization:
    return ResumeOptimization(suggestions=[raw], score=70, keywords=[])


def job_match_fallback(raw: str) -> JobMatchAnalysis:
    return JobMatchAnalysis(
        overall_score=50,
        skills_match=50,
        experience_match=50,
        education_match=50,
        missing_skills=[],
        matching_skills=[],
        reasoning=raw,
    )


def interview_questions_fallback(
    category: InterviewCategory, job_title: str
) -> list[InterviewQuestion]:
    return [
        InterviewQuestion(
            question=f"What {category.value} challenges have you faced as a {job_title}?",
            suggested_answer="Describe specific examples from your experience...",
            tips="Use the STAR method for behavioral, show problem-solving for technical",
            category=category.value,
            difficulty="medium",
        )
    ]


def answer_evaluation_fallback(raw: str) -> AnswerEvaluation:
    return AnswerEvaluation(score=5, feedback=raw, improvements=[])


def skills_gap_fallback() -> SkillsGapAnalysis:
    return SkillsGapAnalysis(missing_skills=[], learning_path=[], resources=[], timeline="Varies")


def salary_insights_fallback() -> SalaryInsights:
    return SalaryInsights(
        salary_range=SalaryRange(min=50_000, max=100_000, median=75_000),
        factors=[],
        negotiation_tips=[],
    )


def company_analysis_fallback(raw: str) -> CompanyAnalysis:
    return CompanyAnalysis(
        overview=raw,
        culture="",
        interview_tips=[],
        questions_to_ask=[],
        pros_and_cons=ProsAndCons(pros=[], cons=[]),
    )


# ── Service ─────────────────────────────────────────────────────────────────


class CareerAiService:
    """Typed AI operations over a generic chat transport.

    Parameters
    ----------
    transport:
        Anything implementing :class:`ChatTransport`; the production wiring
        injects the OpenRouter adapter.
    """

    def __init__(self, transport: ChatTransport) -> None:
        self._transport = transport

    async def _ask(
        self, persona: str, prompt: str, options: ChatOptions | None = None
    ) -> str:
        messages = [
            ChatMessage(ChatRole.SYSTEM, persona),
            ChatMessage(ChatRole.USER, prompt),
        ]
        return await self._transport.send(messages, options)

    # ── Free-form ───────────────────────────────────────────────────────

    async def chat(
        self, messages: Sequence[ChatMessage], options: ChatOptions | None = None
    ) -> str:
        """Forward an arbitrary conversation and return the reply text."""
        return await self._transport.send(messages, options)

    # ── Résumé ──────────────────────────────────────────────────────────

    async def summarize_experience(self, request: ExperienceSummaryRequest) -> str:
        return await self._ask(
            prompts.RESUME_WRITER_PERSONA, prompts.resume_summary_prompt(request)
        )

    async def optimize_resume(self, request: ResumeOptimizationRequest) -> ResumeOptimization:
        raw = await self._ask(
            prompts.ATS_EXPERT_PERSONA, prompts.resume_optimization_prompt(request)
        )
        return decode(
            raw,
            resume_optimization_fallback(raw),
            ResumeOptimization,
            operation="optimize_resume",
        )

    async def enhance_bullets(self, request: BulletEnhancementRequest) -> list[str]:
        """Rewrite bullet points; the caller's bullets come back on bad output."""
        raw = await self._ask(
            prompts.BULLET_WRITER_PERSONA, prompts.bullet_enhancement_prompt(request)
        )
        return decode(raw, list(request.bullets), list[str], operation="enhance_bullets")

    # ── Cover letter ────────────────────────────────────────────────────

    async def generate_cover_letter(self, request: CoverLetterRequest) -> str:
        return await self._ask(
            prompts.COVER_LETTER_PERSONA, prompts.cover_letter_prompt(request)
        )

    # ── Job match ───────────────────────────────────────────────────────

    async def analyze_job_match(self, request: JobMatchRequest) -> JobMatchAnalysis:
        raw = await self._ask(prompts.RECRUITER_PERSONA, prompts.job_match_prompt(request))
        return decode(
            raw, job_match_fallback(raw), JobMatchAnalysis, operation="analyze_job_match"
        )

    # ── Interview prep ──────────────────────────────────────────────────

    async def generate_interview_questions(
        self, request: InterviewQuestionsRequest
    ) -> list[InterviewQuestion]:
        """Generate questions of a single category.

        A lone JSON object is accepted as a one-question list.  Questions
        tagged with any other category are dropped; if nothing survives, the
        fallback question is returned.
        """
        category = InterviewCategory(request.category)
        fallback = interview_questions_fallback(category, request.job_title)
        raw = await self._ask(
            prompts.INTERVIEW_COACH_PERSONA,
            prompts.interview_questions_prompt(request),
            _INTERVIEW_OPTIONS,
        )

        def on_topic(
            decoded: list[InterviewQuestion] | InterviewQuestion,
        ) -> list[InterviewQuestion] | DecodeFailure:
            questions = [decoded] if isinstance(decoded, InterviewQuestion) else decoded
            kept = [q for q in questions if q.category == category.value]
            if len(kept) < len(questions):
                logger.warning(
                    "Dropped %d of %d interview questions outside category %r",
                    len(questions) - len(kept),
                    len(questions),
                    category.value,
                )
            if not kept:
                return DecodeFailure(
                    reason=f"no questions in category {category.value!r}",
                    excerpt=raw[:200],
                )
            return kept

        return decode(
            raw,
            fallback,
            list[InterviewQuestion] | InterviewQuestion,
            operation="generate_interview_questions",
            refine=on_topic,
        )

    async def evaluate_interview_answer(
        self, request: AnswerEvaluationRequest
    ) -> AnswerEvaluation:
        raw = await self._ask(
            prompts.ANSWER_REVIEWER_PERSONA, prompts.answer_evaluation_prompt(request)
        )
        return decode(
            raw,
            answer_evaluation_fallback(raw),
            AnswerEvaluation,
            operation="evaluate_interview_answer",
        )

    # ── Skills & salary ─────────────────────────────────────────────────

    async def analyze_skills_gap(self, request: SkillsGapRequest) -> SkillsGapAnalysis:
        raw = await self._ask(
            prompts.CAREER_DEVELOPMENT_PERSONA, prompts.skills_gap_prompt(request)
        )
        return decode(
            raw, skills_gap_fallback(), SkillsGapAnalysis, operation="analyze_skills_gap"
        )

    async def get_salary_insights(self, request: SalaryInsightsRequest) -> SalaryInsights:
        raw = await self._ask(
            prompts.COMPENSATION_PERSONA, prompts.salary_insights_prompt(request)
        )
        return decode(
            raw, salary_insights_fallback(), SalaryInsights, operation="get_salary_insights"
        )

    # ── Company research ────────────────────────────────────────────────

    async def analyze_company(self, request: CompanyAnalysisRequest) -> CompanyAnalysis:
        raw = await self._ask(
            prompts.COMPANY_RESEARCH_PERSONA, prompts.company_analysis_prompt(request)
        )
        return decode(
            raw, company_analysis_fallback(raw), CompanyAnalysis, operation="analyze_company"
        )

    # ── Outreach ────────────────────────────────────────────────────────

    async def generate_networking_message(self, request: NetworkingMessageRequest) -> str:
        return await self._ask(
            prompts.NETWORKING_PERSONA, prompts.networking_message_prompt(request)
        )

    async def generate_follow_up_email(self, request: FollowUpEmailRequest) -> str:
        return await self._ask(
            prompts.COMMUNICATION_PERSONA, prompts.follow_up_email_prompt(request)
        )

"""API routes — thin controllers that delegate to the career AI service."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from career_ai.domain.entities import (
    AnswerEvaluationRequest,
    BulletEnhancementRequest,
    ChatMessage,
    ChatOptions,
    CompanyAnalysisRequest,
    CoverLetterRequest,
    ExperienceSummaryRequest,
    FollowUpEmailRequest,
    InterviewQuestionsRequest,
    JobMatchRequest,
    NetworkingMessageRequest,
    ResumeOptimizationRequest,
    SalaryInsightsRequest,
    SkillsGapRequest,
)
from career_ai.domain.results import (
    AnswerEvaluation,
    CompanyAnalysis,
    JobMatchAnalysis,
    ResumeOptimization,
    SalaryInsights,
    SkillsGapAnalysis,
)
from career_ai.interface.dependencies import get_ai_service
from career_ai.interface.schemas import (
    ChatBody,
    ChatResponse,
    CompanyAnalyzeBody,
    CoverLetterBody,
    CoverLetterResponse,
    EmailResponse,
    EnhanceBulletsBody,
    EnhancedBulletsResponse,
    EvaluateAnswerBody,
    FollowUpEmailBody,
    InterviewQuestionsBody,
    InterviewQuestionsResponse,
    JobMatchBody,
    MessageResponse,
    NetworkingMessageBody,
    ResumeOptimizeBody,
    ResumeSummaryBody,
    SalaryInsightsBody,
    SkillsGapBody,
    SummaryResponse,
)
from career_ai.services.career_ai import CareerAiService

_ERRORS = {
    422: {"description": "Invalid request body"},
    502: {"description": "AI provider error"},
    503: {"description": "AI service not configured"},
}

router = APIRouter(prefix="/api/ai", responses=_ERRORS)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatBody, service: CareerAiService = Depends(get_ai_service)
) -> ChatResponse:
    """Forward a free-form conversation to the model."""
    messages = [ChatMessage(role=m.role, content=m.content) for m in body.messages]
    options = ChatOptions(temperature=body.temperature, max_tokens=body.max_tokens)
    return ChatResponse(response=await service.chat(messages, options))


# ── Résumé ──────────────────────────────────────────────────────────────────


@router.post("/resume/summary", response_model=SummaryResponse)
async def resume_summary(
    body: ResumeSummaryBody, service: CareerAiService = Depends(get_ai_service)
) -> SummaryResponse:
    summary = await service.summarize_experience(
        ExperienceSummaryRequest(
            experience=body.experience,
            skills=body.skills,
            target_role=body.target_role,
        )
    )
    return SummaryResponse(summary=summary)


@router.post("/resume/optimize", response_model=ResumeOptimization)
async def resume_optimize(
    body: ResumeOptimizeBody, service: CareerAiService = Depends(get_ai_service)
) -> ResumeOptimization:
    return await service.optimize_resume(
        ResumeOptimizationRequest(resume=body.resume, job_description=body.job_description)
    )


@router.post("/resume/enhance-bullets", response_model=EnhancedBulletsResponse)
async def resume_enhance_bullets(
    body: EnhanceBulletsBody, service: CareerAiService = Depends(get_ai_service)
) -> EnhancedBulletsResponse:
    enhanced = await service.enhance_bullets(
        BulletEnhancementRequest(bullets=body.bullets, role=body.role, company=body.company)
    )
    return EnhancedBulletsResponse(enhanced=enhanced)


# ── Cover letter ────────────────────────────────────────────────────────────


@router.post("/cover-letter/generate", response_model=CoverLetterResponse)
async def cover_letter_generate(
    body: CoverLetterBody, service: CareerAiService = Depends(get_ai_service)
) -> CoverLetterResponse:
    content = await service.generate_cover_letter(
        CoverLetterRequest(
            job_title=body.job_title,
            company=body.company,
            job_description=body.job_description,
            resume=body.resume,
            tone=body.tone,
        )
    )
    return CoverLetterResponse(content=content)


# ── Job match ───────────────────────────────────────────────────────────────


@router.post("/job/match", response_model=JobMatchAnalysis)
async def job_match(
    body: JobMatchBody, service: CareerAiService = Depends(get_ai_service)
) -> JobMatchAnalysis:
    return await service.analyze_job_match(JobMatchRequest(resume=body.resume, job=body.job))


# ── Interview prep ──────────────────────────────────────────────────────────


@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
async def interview_questions(
    body: InterviewQuestionsBody, service: CareerAiService = Depends(get_ai_service)
) -> InterviewQuestionsResponse:
    questions = await service.generate_interview_questions(
        InterviewQuestionsRequest(
            job_title=body.job_title,
            category=body.interview_type,
            company=body.company,
            skills=body.skills,
            experience_level=body.experience_level,
            count=body.count,
        )
    )
    return InterviewQuestionsResponse(questions=questions)


@router.post("/interview/evaluate", response_model=AnswerEvaluation)
async def interview_evaluate(
    body: EvaluateAnswerBody, service: CareerAiService = Depends(get_ai_service)
) -> AnswerEvaluation:
    return await service.evaluate_interview_answer(
        AnswerEvaluationRequest(question=body.question, answer=body.answer, context=body.context)
    )


# ── Skills & salary ─────────────────────────────────────────────────────────


@router.post("/skills/gap", response_model=SkillsGapAnalysis)
async def skills_gap(
    body: SkillsGapBody, service: CareerAiService = Depends(get_ai_service)
) -> SkillsGapAnalysis:
    return await service.analyze_skills_gap(
        SkillsGapRequest(
            current_skills=body.current_skills,
            target_role=body.target_role,
            industry=body.industry,
        )
    )


@router.post("/salary/insights", response_model=SalaryInsights)
async def salary_insights(
    body: SalaryInsightsBody, service: CareerAiService = Depends(get_ai_service)
) -> SalaryInsights:
    return await service.get_salary_insights(
        SalaryInsightsRequest(
            job_title=body.job_title,
            location=body.location,
            experience_level=body.experience_level,
            skills=body.skills,
            industry=body.industry,
        )
    )


# ── Company research ────────────────────────────────────────────────────────


@router.post("/company/analyze", response_model=CompanyAnalysis)
async def company_analyze(
    body: CompanyAnalyzeBody, service: CareerAiService = Depends(get_ai_service)
) -> CompanyAnalysis:
    return await service.analyze_company(
        CompanyAnalysisRequest(company_name=body.company_name, role=body.role)
    )


# ── Outreach ────────────────────────────────────────────────────────────────


@router.post("/networking/message", response_model=MessageResponse)
async def networking_message(
    body: NetworkingMessageBody, service: CareerAiService = Depends(get_ai_service)
) -> MessageResponse:
    message = await service.generate_networking_message(
        NetworkingMessageRequest(
            purpose=body.purpose,
            recipient_info=body.recipient_info,
            your_background=body.your_background,
            platform=body.platform,
        )
    )
    return MessageResponse(message=message)


@router.post("/email/follow-up", response_model=EmailResponse)
async def email_follow_up(
    body: FollowUpEmailBody, service: CareerAiService = Depends(get_ai_service)
) -> EmailResponse:
    email = await service.generate_follow_up_email(
        FollowUpEmailRequest(
            context=body.context,
            recipient_name=body.recipient_name,
            recipient_role=body.recipient_role,
            tone=body.tone,
        )
    )
    return EmailResponse(email=email)

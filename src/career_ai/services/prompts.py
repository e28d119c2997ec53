"""Prompt templates — one pure function per feature.

Every template renders a request into the complete user instruction.  For
structured features the instruction spells out the exact JSON shape and asks
for nothing else.  Optional request fields that are absent are left out of
the prompt entirely.  Templates never talk to the provider.
"""

from __future__ import annotations

import json
from typing import Any

from career_ai.domain.entities import (
    AnswerEvaluationRequest,
    BulletEnhancementRequest,
    CompanyAnalysisRequest,
    CoverLetterRequest,
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

# ── System personas ─────────────────────────────────────────────────────────

_JSON_ONLY = "Always respond with valid JSON only, with no markdown and no commentary."

RESUME_WRITER_PERSONA = (
    "You are an expert resume writer with years of experience helping "
    "professionals land their dream jobs."
)
ATS_EXPERT_PERSONA = f"You are an ATS optimization expert and career coach. {_JSON_ONLY}"
BULLET_WRITER_PERSONA = (
    "You are an expert resume writer. "
    "Always respond with a valid JSON array of strings and nothing else."
)
COVER_LETTER_PERSONA = (
    "You are an expert career coach who writes compelling cover letters "
    "that help candidates stand out."
)
RECRUITER_PERSONA = f"You are a recruiting expert who analyzes candidate-job fit. {_JSON_ONLY}"
INTERVIEW_COACH_PERSONA = (
    "You are an expert interview coach who has helped thousands of candidates "
    "prepare. Always respond with the raw JSON array only - no markdown, no code "
    "blocks, no commentary."
)
ANSWER_REVIEWER_PERSONA = (
    f"You are an interview coach providing constructive feedback. {_JSON_ONLY}"
)
CAREER_DEVELOPMENT_PERSONA = f"You are a career development expert. {_JSON_ONLY}"
COMPENSATION_PERSONA = (
    "You are a compensation expert with knowledge of market salary data. "
    f"{_JSON_ONLY}"
)
COMPANY_RESEARCH_PERSONA = (
    "You are a career research expert with extensive knowledge about companies. "
    f"{_JSON_ONLY}"
)
COMMUNICATION_PERSONA = "You are an expert at professional communication."
NETWORKING_PERSONA = "You are an expert at professional networking and communication."

# ── Interview categories ────────────────────────────────────────────────────

CATEGORY_INSTRUCTIONS: dict[InterviewCategory, str] = {
    InterviewCategory.TECHNICAL: (
        "Generate ONLY technical questions about coding, system design, "
        "algorithms, data structures, debugging, and technical problem-solving. "
        'DO NOT include behavioral questions like "tell me about yourself". '
        "Focus on code implementation, technical concepts, architecture "
        "decisions, debugging scenarios, and technical trade-offs."
    ),
    InterviewCategory.BEHAVIORAL: (
        "Generate ONLY behavioral questions suited to the STAR method. Focus on "
        "past experiences, teamwork, leadership, conflict resolution, and soft "
        'skills, e.g. "Tell me about a time when...", "Describe a situation '
        'where...". DO NOT include technical or hypothetical questions.'
    ),
    InterviewCategory.SITUATIONAL: (
        "Generate ONLY situational (hypothetical) questions about how the "
        'candidate would handle a scenario, e.g. "What would you do if...", '
        '"How would you handle...". DO NOT include questions about past '
        "experiences or pure technical knowledge."
    ),
    InterviewCategory.GENERAL: (
        "Generate a mix of behavioral, situational, and role-specific questions "
        "suitable for a general interview."
    ),
}


# ── Helpers ─────────────────────────────────────────────────────────────────


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def _join(*lines: str | None) -> str:
    """Join prompt lines, dropping the ``None`` placeholders of absent fields."""
    return "\n".join(line for line in lines if line is not None)


def _opt(label: str, value: Any) -> str | None:
    return f"{label}: {value}" if value else None


# ── Résumé ──────────────────────────────────────────────────────────────────


def resume_summary_prompt(request: ExperienceSummaryRequest) -> str:
    return _join(
        "Generate a professional resume summary based on the following information:",
        "",
        f"Experience: {_dump(request.experience)}",
        f"Skills: {', '.join(request.skills)}",
        _opt("Target Role", request.target_role),
        "",
        "Write a compelling 3-4 sentence professional summary that highlights key "
        "achievements and qualifications. Be specific and use action words.",
    )


def resume_optimization_prompt(request: ResumeOptimizationRequest) -> str:
    return _join(
        "Analyze this resume and provide optimization suggestions:",
        "",
        f"Resume: {_dump(request.resume)}",
        _opt("Target Job Description", request.job_description),
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "suggestions": ["<specific improvement suggestion>", ...],',
        '  "score": <integer ATS compatibility score 0-100>,',
        '  "keywords": ["<important keyword to include>", ...]',
        "}",
        "",
        "Return only the JSON object.",
    )


def bullet_enhancement_prompt(request: BulletEnhancementRequest) -> str:
    numbered = [f"{i}. {bullet}" for i, bullet in enumerate(request.bullets, start=1)]
    return _join(
        f"Improve these resume bullet points for a {request.role} position "
        f"at {request.company}:",
        "",
        "Current bullets:",
        *numbered,
        "",
        "Rewrite each bullet point to:",
        "- Start with a strong action verb",
        "- Include quantifiable achievements where possible",
        "- Be concise but impactful",
        "- Use industry-relevant keywords",
        "",
        f"Return exactly {len(request.bullets)} improved bullets, in the same order, "
        "as a JSON array of strings.",
    )


# ── Cover letter ────────────────────────────────────────────────────────────


def cover_letter_prompt(request: CoverLetterRequest) -> str:
    resume = f"Candidate Background: {_dump(request.resume)}" if request.resume else None
    return _join(
        "Write a compelling cover letter for the following position:",
        "",
        f"Position: {request.job_title}",
        f"Company: {request.company}",
        _opt("Job Description", request.job_description),
        resume,
        f"Tone: {request.tone or 'professional'}",
        "",
        "Create a personalized, engaging cover letter that:",
        "- Opens with a strong hook",
        "- Highlights relevant experience and achievements",
        "- Shows enthusiasm for the company and role",
        "- Ends with a clear call to action",
        "",
        "Write the complete cover letter.",
    )


# ── Job match ───────────────────────────────────────────────────────────────


def job_match_prompt(request: JobMatchRequest) -> str:
    return _join(
        "Analyze how well this candidate matches the job:",
        "",
        "Resume/Candidate:",
        _dump(request.resume),
        "",
        "Job Posting:",
        _dump(request.job),
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "overallScore": <integer 0-100>,',
        '  "skillsMatch": <integer 0-100>,',
        '  "experienceMatch": <integer 0-100>,',
        '  "educationMatch": <integer 0-100>,',
        '  "missingSkills": ["<skill>", ...],',
        '  "matchingSkills": ["<skill>", ...],',
        '  "reasoning": "<detailed explanation>"',
        "}",
        "",
        "Return only the JSON object.",
    )


# ── Interview prep ──────────────────────────────────────────────────────────


def interview_questions_prompt(request: InterviewQuestionsRequest) -> str:
    """Render a question-generation prompt locked to one category.

    Only the requested category's instruction block is included, and every
    question must echo that category in its own ``category`` field.
    """
    category = InterviewCategory(request.category)
    name = category.value
    skills = ", ".join(request.skills) if request.skills else None
    return _join(
        f"Generate exactly {request.count} {name.upper()} interview questions for:",
        "",
        f"Position: {request.job_title}",
        _opt("Company", request.company),
        f"Interview Type: {name}",
        _opt("Key Skills", skills),
        _opt("Experience Level", request.experience_level),
        "",
        f"IMPORTANT: {CATEGORY_INSTRUCTIONS[category]}",
        "",
        "For each question, provide:",
        f"1. The question itself (matching the {name} type)",
        "2. A suggested answer approach",
        "3. Tips for answering well",
        f'4. Category (must be "{name}" for every question)',
        "5. Difficulty (easy/medium/hard)",
        "",
        "Respond with a JSON array of objects of exactly this shape:",
        "[",
        "  {",
        '    "question": "<question text>",',
        '    "suggestedAnswer": "<suggested answer approach>",',
        '    "tips": "<tips for answering>",',
        f'    "category": "{name}",',
        '    "difficulty": "easy" | "medium" | "hard"',
        "  }",
        "]",
    )


def answer_evaluation_prompt(request: AnswerEvaluationRequest) -> str:
    return _join(
        "Evaluate this interview answer:",
        "",
        f"Question: {request.question}",
        _opt("Context", request.context),
        "",
        f"Candidate's Answer: {request.answer}",
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "score": <integer 1-10>,',
        '  "feedback": "<detailed feedback>",',
        '  "improvements": ["<suggestion>", ...]',
        "}",
    )


# ── Skills & salary ─────────────────────────────────────────────────────────


def skills_gap_prompt(request: SkillsGapRequest) -> str:
    return _join(
        "Analyze the skills gap for this career transition:",
        "",
        f"Current Skills: {', '.join(request.current_skills)}",
        f"Target Role: {request.target_role}",
        _opt("Industry", request.industry),
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "missingSkills": ["<skill>", ...],',
        '  "learningPath": ["<step>", ...],',
        '  "resources": ["<resource>", ...],',
        '  "timeline": "<estimated timeline to acquire the skills>"',
        "}",
    )


def salary_insights_prompt(request: SalaryInsightsRequest) -> str:
    skills = ", ".join(request.skills) if request.skills else None
    return _join(
        "Provide salary insights for:",
        "",
        f"Position: {request.job_title}",
        f"Location: {request.location}",
        f"Experience Level: {request.experience_level}",
        _opt("Skills", skills),
        _opt("Industry", request.industry),
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "salaryRange": {"min": <integer>, "max": <integer>, "median": <integer>},',
        '  "factors": ["<factor affecting salary>", ...],',
        '  "negotiationTips": ["<tip>", ...]',
        "}",
        "",
        "Use realistic annual USD figures as whole numbers, with min <= median <= max.",
    )


# ── Company research ────────────────────────────────────────────────────────


def company_analysis_prompt(request: CompanyAnalysisRequest) -> str:
    target = f" for a {request.role} position" if request.role else ""
    return _join(
        f"Provide insights about {request.company_name}{target}.",
        "",
        "Respond with a JSON object of exactly this shape:",
        "{",
        '  "overview": "<company overview>",',
        '  "culture": "<company culture description>",',
        '  "interviewTips": ["<tip>", ...],',
        '  "questionsToAsk": ["<question>", ...],',
        '  "prosAndCons": {"pros": ["<pro>", ...], "cons": ["<con>", ...]}',
        "}",
    )


# ── Outreach ────────────────────────────────────────────────────────────────


def networking_message_prompt(request: NetworkingMessageRequest) -> str:
    return _join(
        "Write a networking message:",
        "",
        f"Purpose: {request.purpose}",
        f"Recipient: {request.recipient_info}",
        _opt("Your Background", request.your_background),
        f"Platform: {request.platform or 'LinkedIn'}",
        "",
        "Write a personalized, non-generic networking message that's likely to "
        "get a response.",
    )


def follow_up_email_prompt(request: FollowUpEmailRequest) -> str:
    return _join(
        "Write a professional follow-up email:",
        "",
        f"Context: {request.context}",
        _opt("Recipient", request.recipient_name),
        _opt("Recipient Role", request.recipient_role),
        f"Tone: {request.tone or 'professional'}",
        "",
        "Write a concise, effective follow-up email.",
    )

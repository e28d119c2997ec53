"""Tests for the HTTP adapter: request mapping, response shapes and error envelopes."""

from __future__ import annotations

import json

import pytest
from httpx import ASGITransport, AsyncClient

from career_ai.domain.exceptions import ConfigurationError, TransportError
from career_ai.domain.ports.chat_transport import ChatTransport
from career_ai.interface.app import create_app
from career_ai.interface.dependencies import get_ai_service
from career_ai.services.career_ai import CareerAiService


def _client(transport: ChatTransport) -> AsyncClient:
    app = create_app()
    app.dependency_overrides[get_ai_service] = lambda: CareerAiService(transport)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestRoutes:
    @pytest.mark.asyncio
    async def test_health(self, transport):
        async with _client(transport) as client:
            resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_metrics_exposes_decode_counter(self, transport):
        transport.reply = "not json"
        async with _client(transport) as client:
            await client.post("/api/ai/resume/optimize", json={"resume": {}})
            resp = await client.get("/metrics")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert (
            'structured_decode_total{operation="optimize_resume",outcome="fallback"}'
            in resp.text
        )

    @pytest.mark.asyncio
    async def test_job_match_uses_camel_case(self, transport):
        payload = {
            "overallScore": 82,
            "skillsMatch": 90,
            "experienceMatch": 70,
            "educationMatch": 65,
            "missingSkills": [],
            "matchingSkills": ["Go"],
            "reasoning": "Good fit.",
        }
        transport.reply = json.dumps(payload)
        async with _client(transport) as client:
            resp = await client.post("/api/ai/job/match", json={"resume": {}, "job": {}})
        assert resp.status_code == 200
        assert resp.json() == payload

    @pytest.mark.asyncio
    async def test_optimize_resume_fallback_over_http(self, transport):
        transport.reply = "Sorry, I can't help."
        async with _client(transport) as client:
            resp = await client.post(
                "/api/ai/resume/optimize",
                json={"resume": {"skills": ["Go"], "experience": []}},
            )
        assert resp.status_code == 200
        assert resp.json() == {"suggestions": ["Sorry, I can't help."], "score": 70, "keywords": []}

    @pytest.mark.asyncio
    async def test_interview_questions_maps_interview_type(self, transport):
        transport.reply = "not json"
        async with _client(transport) as client:
            resp = await client.post(
                "/api/ai/interview/questions",
                json={"jobTitle": "SRE", "interviewType": "technical", "count": 3},
            )
        assert resp.status_code == 200
        (question,) = resp.json()["questions"]
        assert question["category"] == "technical"
        assert "suggestedAnswer" in question
        prompt = transport.calls[0][0][1].content
        assert "Generate exactly 3 TECHNICAL interview questions" in prompt

    @pytest.mark.asyncio
    async def test_enhance_bullets_envelope(self, transport):
        transport.reply = '```json\n["a","b"]\n```'
        async with _client(transport) as client:
            resp = await client.post(
                "/api/ai/resume/enhance-bullets",
                json={"bullets": ["x", "y"], "role": "Dev", "company": "Acme"},
            )
        assert resp.json() == {"enhanced": ["a", "b"]}

    @pytest.mark.asyncio
    async def test_free_text_envelopes(self, transport):
        transport.reply = "text"
        async with _client(transport) as client:
            summary = await client.post("/api/ai/resume/summary", json={"skills": ["Go"]})
            letter = await client.post(
                "/api/ai/cover-letter/generate", json={"jobTitle": "Dev", "company": "Acme"}
            )
            message = await client.post(
                "/api/ai/networking/message",
                json={"purpose": "Coffee", "recipientInfo": "Sam"},
            )
            email = await client.post("/api/ai/email/follow-up", json={"context": "Onsite"})
            chat = await client.post(
                "/api/ai/chat", json={"messages": [{"role": "user", "content": "hi"}]}
            )
        assert summary.json() == {"summary": "text"}
        assert letter.json() == {"content": "text"}
        assert message.json() == {"message": "text"}
        assert email.json() == {"email": "text"}
        assert chat.json() == {"response": "text"}

    @pytest.mark.asyncio
    async def test_chat_forwards_options(self, transport):
        transport.reply = "ok"
        async with _client(transport) as client:
            await client.post(
                "/api/ai/chat",
                json={
                    "messages": [{"role": "user", "content": "hi"}],
                    "temperature": 0.3,
                    "maxTokens": 64,
                },
            )
        _, options = transport.calls[0]
        assert options.temperature == 0.3
        assert options.max_tokens == 64


class TestErrorEnvelopes:
    @pytest.mark.asyncio
    async def test_configuration_error_is_503(self, transport):
        transport.error = ConfigurationError("OPENROUTER_API_KEY missing")
        async with _client(transport) as client:
            resp = await client.post("/api/ai/skills/gap", json={"currentSkills": [], "targetRole": "PM"})
        assert resp.status_code == 503
        assert resp.json() == {"status": "error", "message": "AI service is not configured."}

    @pytest.mark.asyncio
    async def test_transport_error_is_502_without_provider_body(self, transport):
        transport.error = TransportError(
            "OpenRouter API error: 500 - secret body", status_code=500, body="secret body"
        )
        async with _client(transport) as client:
            resp = await client.post("/api/ai/company/analyze", json={"companyName": "Acme"})
        assert resp.status_code == 502
        assert resp.json()["status"] == "error"
        assert "secret body" not in resp.text

    @pytest.mark.asyncio
    async def test_invalid_body_is_422(self, transport):
        async with _client(transport) as client:
            resp = await client.post(
                "/api/ai/interview/questions", json={"jobTitle": "SRE", "interviewType": "trivia"}
            )
        assert resp.status_code == 422
        assert resp.json()["status"] == "error"

    @pytest.mark.asyncio
    async def test_blank_company_name_is_422(self, transport):
        async with _client(transport) as client:
            resp = await client.post("/api/ai/company/analyze", json={"companyName": "   "})
        assert resp.status_code == 422
        assert transport.calls == []

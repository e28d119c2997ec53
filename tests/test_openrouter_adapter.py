"""Tests for the OpenRouter transport adapter (HTTP mocked with httpx.MockTransport)."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from career_ai.domain.entities import (
    ChatMessage,
    ChatOptions,
    ChatRole,
    ResumeOptimizationRequest,
)
from career_ai.domain.exceptions import ConfigurationError, TransportError
from career_ai.infrastructure.config import GatewayConfig
from career_ai.infrastructure.openrouter_adapter import OpenRouterAdapter
from career_ai.services.career_ai import CareerAiService

_CONFIG = GatewayConfig(
    api_key="sk-or-test",
    base_url="https://openrouter.test/api/v1",
    model="test/model",
    referer="http://localhost:3000",
    title="AI Resume Job Application",
    timeout=5.0,
)

_MESSAGES = [
    ChatMessage(ChatRole.SYSTEM, "You are helpful."),
    ChatMessage(ChatRole.USER, "Say hi."),
]


def _completion(content: str | None) -> dict:
    return {
        "id": "gen-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test/model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
    }


class _Recorder:
    """MockTransport handler that records requests and returns a fixed response."""

    def __init__(self, response: httpx.Response | None = None, delay: float = 0.0) -> None:
        self.response = response or httpx.Response(200, json=_completion("hi"))
        self.delay = delay
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.response


def _adapter(handler, config: GatewayConfig = _CONFIG) -> OpenRouterAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenRouterAdapter(config, http_client=client)


class TestSend:
    @pytest.mark.asyncio
    async def test_returns_first_completion_text(self):
        adapter = _adapter(_Recorder())
        assert await adapter.send(_MESSAGES) == "hi"
        await adapter.close()

    @pytest.mark.asyncio
    async def test_request_wire_format(self):
        recorder = _Recorder()
        adapter = _adapter(recorder)

        await adapter.send(_MESSAGES, ChatOptions(temperature=0.2, max_tokens=123))
        await adapter.close()

        (request,) = recorder.requests
        assert request.method == "POST"
        assert str(request.url) == "https://openrouter.test/api/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer sk-or-test"
        assert request.headers["http-referer"] == "http://localhost:3000"
        assert request.headers["x-title"] == "AI Resume Job Application"
        assert request.headers["content-type"].startswith("application/json")

        body = json.loads(request.content)
        assert body["model"] == "test/model"
        assert body["messages"] == [
            {"role": "system", "content": "You are helpful."},
            {"role": "user", "content": "Say hi."},
        ]
        assert body["temperature"] == 0.2
        assert body["max_tokens"] == 123

    @pytest.mark.asyncio
    async def test_default_options(self):
        recorder = _Recorder()
        adapter = _adapter(recorder)
        await adapter.send(_MESSAGES)
        await adapter.close()

        body = json.loads(recorder.requests[0].content)
        assert body["temperature"] == 0.7
        assert body["max_tokens"] == 2000

    @pytest.mark.asyncio
    async def test_no_choices_returns_empty_string(self):
        payload = _completion("unused")
        payload["choices"] = []
        adapter = _adapter(_Recorder(httpx.Response(200, json=payload)))
        assert await adapter.send(_MESSAGES) == ""
        await adapter.close()

    @pytest.mark.asyncio
    async def test_null_content_returns_empty_string(self):
        adapter = _adapter(_Recorder(httpx.Response(200, json=_completion(None))))
        assert await adapter.send(_MESSAGES) == ""
        await adapter.close()


class TestFailures:
    @pytest.mark.asyncio
    async def test_non_success_status_raises_transport_error(self):
        recorder = _Recorder(httpx.Response(500, text="upstream exploded"))
        adapter = _adapter(recorder)

        with pytest.raises(TransportError) as info:
            await adapter.send(_MESSAGES)
        await adapter.close()

        assert info.value.status_code == 500
        assert info.value.body == "upstream exploded"
        assert len(recorder.requests) == 1  # single attempt, no retry

    @pytest.mark.asyncio
    async def test_rate_limit_is_not_retried(self):
        recorder = _Recorder(httpx.Response(429, json={"error": {"message": "slow down"}}))
        adapter = _adapter(recorder)

        with pytest.raises(TransportError) as info:
            await adapter.send(_MESSAGES)
        await adapter.close()

        assert info.value.status_code == 429
        assert "slow down" in info.value.body
        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = _adapter(handler)
        with pytest.raises(TransportError) as info:
            await adapter.send(_MESSAGES)
        await adapter.close()

        assert info.value.status_code is None

    @pytest.mark.asyncio
    async def test_deadline_raises_transport_error(self):
        adapter = _adapter(_Recorder(delay=2.0))
        with pytest.raises(TransportError, match="did not answer"):
            await adapter.send(_MESSAGES, ChatOptions(timeout=0.05))
        await adapter.close()


class TestConfigurationFailFast:
    @pytest.mark.asyncio
    async def test_missing_key_raises_before_network(self):
        recorder = _Recorder()
        adapter = _adapter(recorder, GatewayConfig(api_key=""))

        with pytest.raises(ConfigurationError):
            await adapter.send(_MESSAGES)

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_facade_with_missing_key_never_touches_network(self):
        recorder = _Recorder()
        service = CareerAiService(_adapter(recorder, GatewayConfig(api_key="")))

        with pytest.raises(ConfigurationError):
            await service.optimize_resume(ResumeOptimizationRequest(resume={"skills": ["Go"]}))

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_end_to_end_fenced_reply(self):
        reply = '```json\n{"suggestions": ["Quantify impact"], "score": 91, "keywords": ["Go"]}\n```'
        service = CareerAiService(_adapter(_Recorder(httpx.Response(200, json=_completion(reply)))))

        result = await service.optimize_resume(ResumeOptimizationRequest(resume={}))

        assert result.score == 91
        assert result.suggestions == ["Quantify impact"]


class TestClose:
    @pytest.mark.asyncio
    async def test_injected_http_client_stays_open(self):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_Recorder()))
        adapter = OpenRouterAdapter(_CONFIG, http_client=http_client)

        await adapter.close()

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        adapter = OpenRouterAdapter(_CONFIG)

        await adapter.close()

        assert adapter._client is not None
        assert adapter._client.is_closed()

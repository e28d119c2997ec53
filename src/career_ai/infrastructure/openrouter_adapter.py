"""OpenRouter adapter — implements the ChatTransport port.

OpenRouter speaks the OpenAI chat-completions protocol, so the official SDK
is pointed at the configured base URL.  One attempt per call: SDK retries are
disabled and nothing here backs off.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from career_ai.domain.entities import ChatMessage, ChatOptions
from career_ai.domain.exceptions import ConfigurationError, TransportError
from career_ai.infrastructure.config import GatewayConfig

logger = logging.getLogger(__name__)


class OpenRouterAdapter:
    """Concrete ``ChatTransport`` backed by an OpenAI-compatible endpoint."""

    def __init__(
        self, config: GatewayConfig, http_client: httpx.AsyncClient | None = None
    ) -> None:
        self._config = config
        self._owns_http_client = http_client is None
        self._client: AsyncOpenAI | None = None
        if config.api_key:
            self._client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=0,
                default_headers={
                    "HTTP-Referer": config.referer,
                    "X-Title": config.title,
                },
                http_client=http_client,
            )

    async def send(
        self, messages: Sequence[ChatMessage], options: ChatOptions | None = None
    ) -> str:
        """POST the conversation to ``/chat/completions`` and return the reply text.

        Raises :class:`ConfigurationError` before touching the network when no
        API key is configured, and :class:`TransportError` for non-success
        statuses, connection failures and an exceeded deadline.
        """
        if self._client is None:
            raise ConfigurationError(
                "OpenRouter API key not configured. "
                "Set OPENROUTER_API_KEY in the environment or .env file."
            )

        opts = options or ChatOptions()
        deadline = opts.timeout if opts.timeout is not None else self._config.timeout

        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._config.model,
                    messages=[m.as_dict() for m in messages],  # type: ignore[misc]
                    temperature=opts.temperature,
                    max_tokens=opts.max_tokens,
                    timeout=deadline,
                ),
                timeout=deadline,
            )

        except asyncio.TimeoutError as exc:
            logger.error("OpenRouter call exceeded its %.1fs deadline", deadline)
            raise TransportError(
                f"OpenRouter did not answer within {deadline:g}s."
            ) from exc

        except APIStatusError as exc:
            body = exc.response.text
            logger.error("OpenRouter API error %d: %s", exc.status_code, body[:400])
            raise TransportError(
                f"OpenRouter API error: {exc.status_code} - {body}",
                status_code=exc.status_code,
                body=body,
            ) from exc

        except APIConnectionError as exc:
            logger.error("OpenRouter connection error: %s", exc)
            raise TransportError(f"OpenRouter request failed: {exc}") from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None) or ""

    async def close(self) -> None:
        """Release the SDK client.

        An injected ``httpx.AsyncClient`` belongs to the caller and is left open.
        """
        if self._client is not None and self._owns_http_client:
            await self._client.close()

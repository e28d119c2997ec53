"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from career_ai.infrastructure.config import GatewayConfig, get_settings
from career_ai.infrastructure.openrouter_adapter import OpenRouterAdapter
from career_ai.services.career_ai import CareerAiService

_http_client: httpx.AsyncClient | None = None
_openrouter_adapter: OpenRouterAdapter | None = None
_ai_service: CareerAiService | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _openrouter_adapter, _ai_service  # noqa: PLW0603

    config = GatewayConfig.from_settings(get_settings())
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(config.timeout))
    _openrouter_adapter = OpenRouterAdapter(config, http_client=_http_client)
    _ai_service = CareerAiService(transport=_openrouter_adapter)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _openrouter_adapter, _ai_service  # noqa: PLW0603

    _ai_service = None
    if _openrouter_adapter:
        await _openrouter_adapter.close()
        _openrouter_adapter = None
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_ai_service() -> CareerAiService:
    """Return the shared service built at startup."""
    assert _ai_service is not None, "startup() was not called"
    return _ai_service

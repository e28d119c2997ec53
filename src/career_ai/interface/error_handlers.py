"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.  Decode
failures never get this far: the service has already substituted its
fallback.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from career_ai.domain.exceptions import CareerAiError, ConfigurationError, TransportError

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[CareerAiError], int, str]] = [
    (ConfigurationError, 503, "AI service is not configured."),
    (TransportError, 502, "AI service is currently unavailable. Please try again later."),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code, public_message in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int, message: str
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                # Provider bodies and key hints stay in the log, not the response.
                logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
                return _error_json(status_code, message)

            return handler

        app.add_exception_handler(exc_type, _make_handler(code, public_message))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")

"""Domain exception hierarchy.

Only infrastructure-level failures are exceptions.  Bad model output is not:
it is reported as a :class:`~career_ai.domain.entities.DecodeFailure` value
and replaced by the operation's fallback before it reaches the caller.
"""

from __future__ import annotations


class CareerAiError(Exception):
    """Base exception for the entire application."""


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigurationError(CareerAiError):
    """Required configuration (the provider API key) is missing."""


# ── Provider transport ──────────────────────────────────────────────────────


class TransportError(CareerAiError):
    """The provider answered with a non-success status or could not be reached.

    ``status_code`` is ``None`` for network-level failures and deadlines.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

"""Prometheus metrics for the structured-generation gateway."""

from __future__ import annotations

from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

DECODE_OUTCOMES = Counter(
    "structured_decode_total",
    "Structured decode attempts by operation and outcome",
    ["operation", "outcome"],
)


def record_decode(operation: str, *, fallback: bool) -> None:
    """Count one decode attempt; ``fallback=True`` means the default was used."""
    outcome = "fallback" if fallback else "decoded"
    DECODE_OUTCOMES.labels(operation=operation, outcome=outcome).inc()


def metrics_response() -> Response:
    """Generate Prometheus /metrics response."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

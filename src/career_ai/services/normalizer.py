"""Response normalizer — turns raw model text into a structured value.

Models often wrap JSON in markdown fences or answer in prose.  The helpers
here strip the wrapping, parse, optionally validate against a pydantic
schema, and fall back to a caller-supplied default instead of raising.
Nothing in this module knows which feature is being decoded.
"""

from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter

from career_ai.domain.entities import DecodeFailure
from career_ai.infrastructure.metrics import record_decode

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FENCE = "```"
_EXCERPT_CHARS = 200

# Opening fence with an optional language tag.  "```json{...}" on one line
# is common enough to special-case; other tags must end their line.
_OPEN_FENCE = re.compile(r"^```(?:json\b|[\w+.-]*[ \t]*\r?\n)?", re.IGNORECASE)
_CLOSE_FENCE = re.compile(r"```$")


def unwrap(text: str) -> str:
    """Strip markdown code fences (and the whitespace around them) from *text*.

    Text that neither starts nor ends with a fence is returned unchanged.
    Nested or doubled fences are peeled until none remain at either end, so
    ``unwrap(unwrap(x)) == unwrap(x)`` for every input.
    """
    current = text
    while True:
        candidate = current.strip()
        if not (candidate.startswith(_FENCE) or candidate.endswith(_FENCE)):
            return current
        candidate = _OPEN_FENCE.sub("", candidate, count=1)
        candidate = _CLOSE_FENCE.sub("", candidate, count=1)
        current = candidate.strip()


@lru_cache(maxsize=64)
def _adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def try_decode(raw: str, schema: Any = None) -> Any | DecodeFailure:
    """Parse *raw* as JSON and validate it against *schema* when given.

    Returns the decoded value, or a :class:`DecodeFailure` describing why it
    could not be decoded.  Never raises.
    """
    text = unwrap(raw)
    excerpt = raw[:_EXCERPT_CHARS]

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        return DecodeFailure(reason=f"invalid JSON: {exc}", excerpt=excerpt)

    if schema is None:
        return data

    try:
        return _adapter(schema).validate_python(data)
    except (ValueError, RecursionError) as exc:
        # pydantic.ValidationError is a ValueError
        reason = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
        return DecodeFailure(reason=f"schema mismatch: {reason}", excerpt=excerpt)


def decode(
    raw: str,
    fallback: T,
    schema: Any = None,
    *,
    operation: str = "unknown",
    refine: Callable[[Any], Any] | None = None,
) -> T:
    """Decode *raw*, or log the failure and return *fallback* unchanged.

    *refine* post-processes a decoded value and may reject it by returning a
    :class:`DecodeFailure`; a rejection is logged and counted like any other
    decode failure.
    """
    outcome = try_decode(raw, schema)
    if refine is not None and not isinstance(outcome, DecodeFailure):
        outcome = refine(outcome)
    if isinstance(outcome, DecodeFailure):
        logger.warning(
            "Decode failed for %s (%s); using fallback. Response: %r",
            operation,
            outcome.reason,
            outcome.excerpt,
        )
        record_decode(operation, fallback=True)
        return fallback

    record_decode(operation, fallback=False)
    return outcome

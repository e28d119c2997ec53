from __future__ import annotations

from typing import Sequence

import pytest

from career_ai.domain.entities import ChatMessage, ChatOptions
from career_ai.services.career_ai import CareerAiService


class FakeTransport:
    """In-memory ChatTransport: returns a canned reply and records every call."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[list[ChatMessage], ChatOptions | None]] = []

    async def send(
        self, messages: Sequence[ChatMessage], options: ChatOptions | None = None
    ) -> str:
        self.calls.append((list(messages), options))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def service(transport: FakeTransport) -> CareerAiService:
    return CareerAiService(transport=transport)

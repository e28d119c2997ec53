"""Port: chat transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, Sequence

from career_ai.domain.entities import ChatMessage, ChatOptions


class ChatTransport(Protocol):
    """Abstract contract for sending a conversation to a language model."""

    async def send(
        self, messages: Sequence[ChatMessage], options: ChatOptions | None = None
    ) -> str:
        """Send *messages* and return the text of the first completion."""
        ...

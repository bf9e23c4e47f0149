"""Message and request construction shared by all adapters."""

from __future__ import annotations

from typing import Tuple

from ..dto.run_config import RunConfig
from ..models import ChatMessage, ChatRequest


def build_messages(config: RunConfig) -> Tuple[ChatMessage, ...]:
    """Return the optional system message followed by exactly one user message."""
    messages = []
    if config.system:
        messages.append(ChatMessage(role="system", content=config.system))
    messages.append(ChatMessage(role="user", content=config.prompt or ""))
    return tuple(messages)


def build_request(config: RunConfig, *, stream: bool = False) -> ChatRequest:
    """Build the :class:`ChatRequest` for ``config``."""
    return ChatRequest(
        messages=build_messages(config),
        model=config.model,
        stream=stream,
        temperature=config.temperature,
    )


__all__ = ["build_messages", "build_request"]

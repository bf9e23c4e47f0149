"""
ChatRequest DTO for provider-agnostic chat invocations.

The request carries the ordered messages plus the optional model, streaming
flag, and sampling temperature. ``to_dict`` produces the JSON body sent to
``/chat/completions``; unset optional fields are left out of the body.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from .message import ChatMessage


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request sent to the executor.

    Attributes:
        messages: Ordered chat messages. Empty sequences are tolerated here
            although providers will reject them.
        model: Target model identifier; omitted from the body when empty.
        stream: Streaming flag; the executor forces it per call path.
        temperature: Sampling temperature when set.

    Methods:
        to_dict: Return the JSON-serializable request body.
        with_stream: Return a copy with ``stream`` forced.
        without_model: Return a copy with ``model`` cleared.
    """

    messages: Tuple[ChatMessage, ...] = ()
    model: Optional[str] = None
    stream: Optional[bool] = None
    temperature: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_messages(cls, messages: Sequence[ChatMessage], **kwargs: Any) -> "ChatRequest":
        return cls(messages=tuple(messages), **kwargs)

    def with_stream(self, stream: bool) -> "ChatRequest":
        return replace(self, stream=stream)

    def without_model(self) -> "ChatRequest":
        return replace(self, model=None)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable body for the chat completions endpoint."""
        body: Dict[str, Any] = {}
        if self.model:
            body["model"] = self.model
        body["messages"] = [m.to_dict() for m in self.messages]
        if self.stream is not None:
            body["stream"] = self.stream
        if self.temperature is not None:
            body["temperature"] = self.temperature
        return body


__all__ = [
    "ChatRequest",
]

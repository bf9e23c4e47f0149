"""
ChatMessage DTO used across adapters.

Defines the `ChatMessage` value object and the `Role` literal for the author
of a message. Ordering of messages within a request is significant: the
system message, when present, precedes the user message.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

# Message roles accepted by OpenAI-compatible chat endpoints.
Role = Literal["system", "user", "assistant"]

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content of the message.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"invalid message role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        """Return the wire representation ``{"role", "content"}``."""
        return {"role": self.role, "content": self.content}


__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
]

"""SupportsStreaming Protocol (single-class module).

Capability marker for adapters that can stream incremental text deltas.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from ..models import ChatRequest, ProviderOptions


@runtime_checkable
class SupportsStreaming(Protocol):
    """Capability marker for adapters exposing ``chat_completion_stream``.

    The returned iterator yields non-empty text fragments in arrival order and
    releases the underlying response when exhausted or closed early.
    """

    def chat_completion_stream(self, request: ChatRequest, options: ProviderOptions) -> Iterator[str]:  # pragma: no cover - interface
        """Stream a chat completion as text deltas."""
        ...

"""
gpt-cli base package.

Provider-agnostic building blocks shared by every adapter:
- Models (DTOs): chat messages, requests, options, results
- Errors: taxonomy, normalization and classification
- Streaming: SSE framing
- HTTP: transport pool
- Interfaces: adapter Protocols

The adapter registry lives in ``gpt_cli.base.factory`` and is imported
explicitly because it depends on the concrete adapter packages.
"""

from .errors import ErrorCode, NormalizedError, ProviderError, normalize_error
from .interfaces import HasDefaultModel, ProviderAdapter, SupportsStreaming
from .models import ChatMessage, ChatRequest, ProviderOptions, ProviderResult, Role

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ProviderOptions",
    "ProviderResult",
    "Role",
    "ErrorCode",
    "NormalizedError",
    "ProviderError",
    "normalize_error",
    "ProviderAdapter",
    "SupportsStreaming",
    "HasDefaultModel",
]

"""Modules backing OpenAI-compatible adapters.

- ``executor``: one POST to ``/chat/completions`` (plain or SSE)
- ``urls``: endpoint construction rules
- ``messages``: message list and request construction
- ``adapter_spec`` / ``adapter``: the shared adapter base

Re-exports provide a stable import surface for convenience.
"""

from .adapter import OpenAICompatibleAdapter
from .adapter_spec import AdapterSpec
from .executor import (
    build_headers,
    chat_completion_request,
    chat_completion_stream,
    ensure_response_ok,
    extract_message_content,
)
from .messages import build_messages, build_request
from .urls import chat_completions_url, v1_chat_completions_url, versioned_chat_completions_url

__all__ = [
    "OpenAICompatibleAdapter",
    "AdapterSpec",
    "build_headers",
    "extract_message_content",
    "chat_completion_request",
    "chat_completion_stream",
    "ensure_response_ok",
    "build_messages",
    "build_request",
    "chat_completions_url",
    "v1_chat_completions_url",
    "versioned_chat_completions_url",
]

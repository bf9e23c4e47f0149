"""OpenAI-compatible adapter building blocks (stable import path).

Re-exports ``gpt_cli.base.openai_style_parts``.
"""

from .openai_style_parts import (
    AdapterSpec,
    OpenAICompatibleAdapter,
    build_headers,
    build_messages,
    build_request,
    chat_completion_request,
    chat_completion_stream,
    chat_completions_url,
    ensure_response_ok,
    extract_message_content,
    v1_chat_completions_url,
    versioned_chat_completions_url,
)

__all__ = [
    "AdapterSpec",
    "OpenAICompatibleAdapter",
    "build_headers",
    "build_messages",
    "build_request",
    "chat_completion_request",
    "chat_completion_stream",
    "chat_completions_url",
    "ensure_response_ok",
    "extract_message_content",
    "v1_chat_completions_url",
    "versioned_chat_completions_url",
]

"""GeminiAdapter for Google's OpenAI-compatible Generative Language endpoint.

Endpoint rule: ``<base>/chat/completions`` where the base defaults to
``https://generativelanguage.googleapis.com/v1beta/openai``.
"""

from __future__ import annotations

from ..base.openai_style import AdapterSpec, OpenAICompatibleAdapter, chat_completions_url
from ..config.defaults import GEMINI_DEFAULT_BASE_URL, GEMINI_DEFAULT_MODEL

GEMINI_SPEC = AdapterSpec(
    provider="gemini",
    api_key_name="GEMINI_API_KEY",
    base_url_name="GEMINI_API_BASE",
    default_base_url=GEMINI_DEFAULT_BASE_URL,
    default_model=GEMINI_DEFAULT_MODEL,
)


class GeminiAdapter(OpenAICompatibleAdapter):
    """Adapter for Gemini through its OpenAI compatibility layer."""

    def __init__(self, spec: AdapterSpec = GEMINI_SPEC) -> None:
        super().__init__(spec)

    def build_full_url(self, base: str) -> str:
        return chat_completions_url(base)


__all__ = ["GeminiAdapter", "GEMINI_SPEC"]

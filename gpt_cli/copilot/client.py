"""CopilotAdapter for GitHub Copilot's OpenAI-compatible endpoint.

There is no built-in base URL; it must come from ``ProviderOptions``
(``COPILOT_API_BASE`` at the CLI boundary). Bases that already contain a
``/v1`` segment get only ``/chat/completions`` appended.
"""

from __future__ import annotations

from ..base.openai_style import AdapterSpec, OpenAICompatibleAdapter, versioned_chat_completions_url
from ..config.defaults import GLOBAL_DEFAULT_MODEL

COPILOT_SPEC = AdapterSpec(
    provider="copilot",
    api_key_name="COPILOT_API_KEY",
    base_url_name="COPILOT_API_BASE",
    default_base_url=None,
    default_model=GLOBAL_DEFAULT_MODEL,
)


class CopilotAdapter(OpenAICompatibleAdapter):
    """Adapter for Copilot-style gateways that may already include ``/v1``."""

    def __init__(self, spec: AdapterSpec = COPILOT_SPEC) -> None:
        super().__init__(spec)

    def build_full_url(self, base: str) -> str:
        return versioned_chat_completions_url(base)


__all__ = ["CopilotAdapter", "COPILOT_SPEC"]

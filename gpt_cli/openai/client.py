"""OpenAIAdapter for the OpenAI Chat Completions API.

Endpoint rule: ``<base>/v1/chat/completions`` with
``https://api.openai.com`` as the fallback base.
"""

from __future__ import annotations

from ..base.openai_style import AdapterSpec, OpenAICompatibleAdapter
from ..config.defaults import GLOBAL_DEFAULT_MODEL, OPENAI_DEFAULT_BASE_URL

OPENAI_SPEC = AdapterSpec(
    provider="openai",
    api_key_name="OPENAI_API_KEY",
    base_url_name="OPENAI_API_BASE",
    default_base_url=OPENAI_DEFAULT_BASE_URL,
    default_model=GLOBAL_DEFAULT_MODEL,
)


class OpenAIAdapter(OpenAICompatibleAdapter):
    """Adapter for api.openai.com and drop-in compatible gateways."""

    def __init__(self, spec: AdapterSpec = OPENAI_SPEC) -> None:
        super().__init__(spec)


__all__ = ["OpenAIAdapter", "OPENAI_SPEC"]

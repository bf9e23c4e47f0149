"""Endpoint URL construction rules for OpenAI-compatible providers.

Each rule takes a resolved base URL and returns the full chat completions
endpoint. All rules strip one trailing slash first and leave a base that
already names the endpoint unchanged.
"""

from __future__ import annotations

import re

CHAT_COMPLETIONS_PATH = "/chat/completions"
V1_CHAT_COMPLETIONS_PATH = "/v1/chat/completions"

_V1_SEGMENT = re.compile(r"/v1(?:$|/.+)")


def _strip_slash(base: str) -> str:
    return base[:-1] if base.endswith("/") else base


def v1_chat_completions_url(base: str) -> str:
    """Append ``/v1/chat/completions`` unless the base already ends with it."""
    trimmed = _strip_slash(base)
    if trimmed.endswith(V1_CHAT_COMPLETIONS_PATH):
        return trimmed
    return f"{trimmed}{V1_CHAT_COMPLETIONS_PATH}"


def versioned_chat_completions_url(base: str) -> str:
    """Build the endpoint without doubling an existing ``/v1`` segment.

    - ``https://x/v1/chat/completions`` -> unchanged
    - ``https://x/v1`` (or ``https://x/v1/<path>``) -> ``<base>/chat/completions``
    - ``https://x`` -> ``https://x/v1/chat/completions``
    """
    trimmed = _strip_slash(base)
    if trimmed.endswith(V1_CHAT_COMPLETIONS_PATH):
        return trimmed
    if _V1_SEGMENT.search(trimmed):
        return f"{trimmed}{CHAT_COMPLETIONS_PATH}"
    return f"{trimmed}{V1_CHAT_COMPLETIONS_PATH}"


def chat_completions_url(base: str) -> str:
    """Append ``/chat/completions`` unless the base already ends with it."""
    trimmed = _strip_slash(base)
    if trimmed.endswith(CHAT_COMPLETIONS_PATH):
        return trimmed
    return f"{trimmed}{CHAT_COMPLETIONS_PATH}"


__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "V1_CHAT_COMPLETIONS_PATH",
    "v1_chat_completions_url",
    "versioned_chat_completions_url",
    "chat_completions_url",
]

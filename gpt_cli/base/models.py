"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``gpt_cli.base.models_parts``.
"""

from .models_parts.message import ChatMessage, Role, ROLES
from .models_parts.chat_request import ChatRequest
from .models_parts.provider_options import ProviderOptions
from .models_parts.provider_result import ProviderResult

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatRequest",
    "ProviderOptions",
    "ProviderResult",
]

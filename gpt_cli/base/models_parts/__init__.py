"""Models parts package public surface.

Re-exports individual DTOs; `gpt_cli.base.models` remains the primary
stable import path.
"""

from .message import ChatMessage, Role, ROLES
from .chat_request import ChatRequest
from .provider_options import ProviderOptions
from .provider_result import ProviderResult

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatRequest",
    "ProviderOptions",
    "ProviderResult",
]

"""ProviderAdapter Protocol (single-class module).

Defines the minimal contract every registered adapter satisfies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..dto.run_config import RunConfig
from ..models import ProviderOptions, ProviderResult


@runtime_checkable
class ProviderAdapter(Protocol):
    """Minimal interface for chat provider adapters.

    Implementations resolve their endpoint and credential from the supplied
    ``ProviderOptions`` only, build the message list from ``config``, and
    raise :class:`~gpt_cli.base.errors.ProviderError` on failure.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"copilot"``."""
        ...

    def call_provider(self, config: RunConfig, options: ProviderOptions) -> ProviderResult:
        """Execute one non-streaming chat completion."""
        ...

"""OpenAICompatibleAdapter: shared base for OpenAI-compatible providers.

Purpose:
- Compose the per-provider capability set (credential resolution, base URL
  resolution, endpoint construction) with the shared chat request executor.

Inputs:
- Credentials and endpoints arrive only through ``ProviderOptions``; the
  adapter never reads process environment.

Failure semantics:
- A missing credential or base URL raises a ``CONFIG`` :class:`ProviderError`
  naming the missing setting before any network call is made.
- Executor failures propagate unchanged (already normalized).
"""

from __future__ import annotations

from typing import Iterator, Optional

from ..dto.run_config import RunConfig
from ..errors import ErrorCode, ProviderError
from ..interfaces import HasDefaultModel, ProviderAdapter, SupportsStreaming
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import ChatRequest, ProviderOptions, ProviderResult
from .adapter_spec import AdapterSpec
from .executor import chat_completion_request, chat_completion_stream
from .messages import build_request
from .urls import v1_chat_completions_url


class OpenAICompatibleAdapter(ProviderAdapter, SupportsStreaming, HasDefaultModel):
    """Reusable adapter for endpoints speaking the Chat Completions protocol.

    Subclasses supply an :class:`AdapterSpec` and may override
    :meth:`build_full_url` when their URL rule differs from the default
    ``<base>/v1/chat/completions``.
    """

    def __init__(self, spec: AdapterSpec) -> None:
        self._spec = spec
        self._logger = get_logger(f"providers.{spec.provider}")

    @property
    def provider_name(self) -> str:
        return self._spec.provider

    def default_model(self) -> Optional[str]:
        return self._spec.default_model

    # ----- Capability set -----
    def resolve_auth(self, options: ProviderOptions) -> str:
        """Return the API key from ``options`` or raise a ``CONFIG`` error."""
        api_key = options.api_key or ""
        if not api_key and self._spec.require_api_key:
            raise self._missing(self._spec.api_key_name)
        return api_key

    def resolve_base_url(self, options: ProviderOptions) -> str:
        """Return ``options.base_url``, else the provider default, or raise."""
        base = options.base_url or self._spec.default_base_url or ""
        if not base:
            raise self._missing(self._spec.base_url_name)
        return base

    def build_full_url(self, base: str) -> str:
        """Turn a resolved base URL into the chat completions endpoint."""
        return v1_chat_completions_url(base)

    def endpoint(self, options: ProviderOptions) -> str:
        return self.build_full_url(self.resolve_base_url(options))

    # ----- Calls -----
    def call_provider(self, config: RunConfig, options: ProviderOptions) -> ProviderResult:
        """Run a non-streaming completion for ``config`` and return its text."""
        api_key = self.resolve_auth(options)
        url = self.endpoint(options)
        request = build_request(config, stream=False)
        ctx = LogContext(provider=self.provider_name, model=request.model, url=url, stream=False)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start")
        try:
            text = chat_completion_request(url, api_key, request, options.fetcher, provider=self.provider_name)
        except ProviderError as exc:
            normalized_log_event(self._logger, "chat.error", ctx, phase="error", error_code=exc.kind.value, emitted=False)
            raise
        normalized_log_event(self._logger, "chat.end", ctx, phase="finalize", emitted=True)
        return ProviderResult(text=text)

    def chat_completion_stream(self, request: ChatRequest, options: ProviderOptions) -> Iterator[str]:
        """Open a streaming completion and return its lazy delta sequence."""
        api_key = self.resolve_auth(options)
        url = self.endpoint(options)
        ctx = LogContext(provider=self.provider_name, model=request.model, url=url, stream=True)
        normalized_log_event(self._logger, "stream.start", ctx, phase="start")
        return chat_completion_stream(url, api_key, request, options.fetcher, provider=self.provider_name)

    def _missing(self, name: str) -> ProviderError:
        return ProviderError(
            message=f"{name} not provided in ProviderOptions",
            code="missing_option",
            provider=self.provider_name,
            kind=ErrorCode.CONFIG,
        )


__all__ = ["OpenAICompatibleAdapter"]

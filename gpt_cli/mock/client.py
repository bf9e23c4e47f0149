"""Deterministic test adapter with canned output and no network traffic.

Purpose
-------
Provide an adapter satisfying the ``ProviderAdapter`` and
``SupportsStreaming`` contracts so that the run layer and the CLI can be
exercised offline. It still enforces the credential rule: calls without an
API key fail before producing output.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from ..base.dto.run_config import RunConfig
from ..base.errors import ErrorCode, ProviderError
from ..base.interfaces import HasDefaultModel, ProviderAdapter, SupportsStreaming
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatRequest, ProviderOptions, ProviderResult

TEST_ADAPTER_KEY_NAME = "TEST_ADAPTER_API_KEY"  # pragma: allowlist secret - env name, not a secret
DEFAULT_CHUNKS: Tuple[str, ...] = ("chunk-1", "chunk-2")


class TestAdapter(ProviderAdapter, SupportsStreaming, HasDefaultModel):
    """Adapter returning fixed text and a fixed fragment stream."""

    __test__ = False  # not a pytest test class

    def __init__(self, *, provider: str = "test_adapter", chunks: Optional[Sequence[str]] = None) -> None:
        self._provider = provider
        self._chunks: Tuple[str, ...] = tuple(chunks) if chunks is not None else DEFAULT_CHUNKS
        self._logger = get_logger(f"providers.{provider}")

    @property
    def provider_name(self) -> str:
        return self._provider

    def default_model(self) -> Optional[str]:
        return None

    def call_provider(self, config: RunConfig, options: ProviderOptions) -> ProviderResult:
        """Return the canned chunks joined into one text."""
        self._require_key(options)
        ctx = LogContext(provider=self.provider_name, model=config.model, stream=False)
        normalized_log_event(self._logger, "chat.end", ctx, phase="finalize", emitted=True)
        return ProviderResult(text="".join(self._chunks))

    def chat_completion_stream(self, request: ChatRequest, options: ProviderOptions) -> Iterator[str]:
        """Yield the canned chunks one by one."""
        self._require_key(options)
        return iter(self._chunks)

    def _require_key(self, options: ProviderOptions) -> None:
        if not options.api_key:
            raise ProviderError(
                message=f"{TEST_ADAPTER_KEY_NAME} required",
                code="missing_option",
                provider=self.provider_name,
                kind=ErrorCode.CONFIG,
            )


__all__ = ["TestAdapter", "DEFAULT_CHUNKS", "TEST_ADAPTER_KEY_NAME"]

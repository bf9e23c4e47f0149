"""Run orchestration: one prompt in, one completion out.

Purpose
-------
Drive a single invocation from a resolved :class:`RunConfig`:

1. Fill in run defaults (system prompt, model).
2. When streaming is requested and the adapter supports it, emit fragments
   to the output sink as they arrive.
3. On any streaming failure, fall back to one non-streaming call.
4. When the provider rejects the model and ``auto_retry_model`` is set, retry
   the non-streaming call exactly once without a model.
5. Emit the final text, preferring markdown when ``use_markdown`` is set.

Failure modes
-------------
- :class:`ProviderError` from the non-streaming call (normalized). A failed
  model retry carries the retry's message suffixed with ``" (after retry)"``.
- :class:`UnknownProviderError` when the provider has no adapter.

Streaming failures never surface; they are logged as ``run.stream_fallback``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from ..base.dto.run_config import RunConfig
from ..base.errors import ProviderError, is_model_not_supported, to_provider_error
from ..base.factory import AdapterRegistry, supports_streaming
from ..base.interfaces import HasDefaultModel
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ProviderOptions, ProviderResult
from ..base.openai_style_parts.messages import build_request
from ..config.defaults import DEFAULT_SYSTEM_PROMPT, GLOBAL_DEFAULT_MODEL

Writer = Callable[[str], Any]
Renderer = Callable[[str], str]

RETRY_SUFFIX = " (after retry)"

_logger = get_logger("run")


@dataclass(frozen=True)
class RunOutcome:
    """What a run produced.

    Attributes
    ----------
    output:
        The text written to the sink (joined fragments when streamed).
    streamed:
        True when the streaming path completed.
    retried:
        True when the model retry was used.
    calls:
        Number of provider calls made (stream attempt included).
    """

    output: str
    streamed: bool = False
    retried: bool = False
    calls: int = 0


def _stdout_writer(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def select_output(result: ProviderResult, use_markdown: bool, renderer: Optional[Renderer] = None) -> str:
    """Pick the text to print from a non-streaming result.

    With ``use_markdown`` the markdown form wins and goes through
    ``renderer``; otherwise plain text wins. Either falls back to the other.
    """
    if use_markdown and result.markdown:
        return renderer(result.markdown) if renderer else result.markdown
    return result.preferred(use_markdown) or ""


def _apply_defaults(config: RunConfig, adapter: Any) -> RunConfig:
    updates = {}
    if not config.system:
        updates["system"] = DEFAULT_SYSTEM_PROMPT
    if not config.model:
        model = adapter.default_model() if isinstance(adapter, HasDefaultModel) else None
        updates["model"] = model or GLOBAL_DEFAULT_MODEL
    return config.model_copy(update=updates) if updates else config


def _try_stream(adapter: Any, config: RunConfig, options: ProviderOptions, write: Writer, ctx: LogContext) -> Optional[str]:
    """Return the joined fragments, or ``None`` when streaming failed."""
    emitted: List[str] = []
    try:
        deltas: Iterable[str] = adapter.chat_completion_stream(build_request(config, stream=True), options)
        try:
            for fragment in deltas:
                write(fragment)
                emitted.append(fragment)
        finally:
            close = getattr(deltas, "close", None)
            if callable(close):
                close()
    except Exception as exc:  # noqa: BLE001 - any stream failure falls back
        err = to_provider_error(exc, provider=config.provider, model=config.model)
        normalized_log_event(
            _logger,
            "run.stream_fallback",
            ctx,
            phase="fallback",
            attempt=1,
            error_code=err.kind.value,
            emitted=bool(emitted),
            error=err.describe(),
        )
        if emitted:
            write("\n")
        return None
    normalized_log_event(_logger, "stream.end", ctx, phase="finalize", attempt=1, emitted=bool(emitted), fragments=len(emitted))
    write("\n")
    return "".join(emitted)


def _call_with_retry(
    adapter: Any,
    config: RunConfig,
    options: ProviderOptions,
    phrases: Optional[Iterable[str]],
    ctx: LogContext,
) -> tuple[ProviderResult, bool]:
    try:
        return adapter.call_provider(config, options), False
    except Exception as exc:  # noqa: BLE001 - normalized below
        err = to_provider_error(exc, provider=config.provider, model=config.model)
        if not (config.auto_retry_model and is_model_not_supported(err, phrases)):
            if err is exc:
                raise
            raise err from exc
    normalized_log_event(_logger, "run.retry_model", ctx, phase="retry", attempt=2, error_code=err.kind.value)
    retry_config = config.without_model()
    try:
        return adapter.call_provider(retry_config, options), True
    except Exception as exc:  # noqa: BLE001 - normalized below
        again = to_provider_error(exc, provider=config.provider)
        raise ProviderError(
            message=f"{again.message}{RETRY_SUFFIX}",
            code=again.code,
            provider=again.provider,
            model=again.model,
            kind=again.kind,
            status=again.status,
            retryable=again.retryable,
            raw=again.raw,
        ) from exc


def run_core(
    config: RunConfig,
    options: ProviderOptions,
    *,
    registry: Optional[AdapterRegistry] = None,
    write: Optional[Writer] = None,
    renderer: Optional[Renderer] = None,
    phrases: Optional[Iterable[str]] = None,
) -> RunOutcome:
    """Execute one chat invocation and write its output.

    Parameters
    ----------
    config:
        Resolved run configuration.
    options:
        Credential, endpoint and HTTP client for the selected provider.
    registry:
        Adapter registry; defaults to the built-in adapters.
    write:
        Output sink; defaults to stdout with a flush per fragment.
    renderer:
        Markdown renderer applied to markdown results.
    phrases:
        Model rejection phrases; defaults to the built-in set.
    """
    registry = registry if registry is not None else AdapterRegistry()
    write = write or _stdout_writer
    adapter = registry.get(config.provider)
    config = _apply_defaults(config, adapter)
    ctx = LogContext(provider=config.provider, model=config.model, stream=config.stream)
    calls = 0

    if config.stream:
        if supports_streaming(adapter):
            calls += 1
            text = _try_stream(adapter, config, options, write, ctx)
            if text is not None:
                normalized_log_event(_logger, "run.done", ctx, phase="finalize", attempt=calls, emitted=True, streamed=True)
                return RunOutcome(output=text, streamed=True, calls=calls)
        else:
            normalized_log_event(_logger, "run.stream_fallback", ctx, phase="fallback", emitted=False, reason="unsupported")

    result, retried = _call_with_retry(adapter, config, options, phrases, ctx)
    calls += 2 if retried else 1
    output = select_output(result, config.use_markdown, renderer)
    write(output + "\n")
    normalized_log_event(_logger, "run.done", ctx, phase="finalize", attempt=calls, emitted=True, retried=retried)
    return RunOutcome(output=output, retried=retried, calls=calls)


__all__ = ["RunOutcome", "run_core", "select_output", "RETRY_SUFFIX"]

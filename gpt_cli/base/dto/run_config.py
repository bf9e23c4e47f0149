"""Typed run configuration handed from the CLI boundary to the run layer.

Purpose
-------
Capture the fully resolved record for one invocation (provider, model,
prompts, sampling and output flags) as a validated, immutable object. The
run layer and the adapters treat every field as pre-validated.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_copy`` updates.

Failure modes
-------------
- ``pydantic.ValidationError`` for out-of-range temperature or wrong types.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config.defaults import (
    DEFAULT_AUTO_RETRY_MODEL,
    DEFAULT_PROVIDER,
    DEFAULT_STREAM,
    DEFAULT_TEMPERATURE,
    DEFAULT_USE_MARKDOWN,
)


class RunConfig(BaseModel):
    """Resolved configuration for a single chat invocation.

    Attributes
    ----------
    provider:
        Adapter key, lower-cased on validation (e.g. ``"copilot"``).
    model:
        Model identifier; ``None`` lets the endpoint choose.
    temperature:
        Sampling temperature in ``[0, 2]``.
    system:
        System prompt; sent only when non-empty.
    prompt:
        User prompt (may be empty).
    verbose:
        Emit diagnostic logs on stderr.
    use_markdown:
        Render markdown output when available.
    auto_retry_model:
        Retry once without a model when the provider rejects it.
    stream:
        Attempt the streaming path first.
    file:
        Optional path whose contents were attached to the prompt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: str = DEFAULT_PROVIDER
    model: Optional[str] = None
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    system: str = ""
    prompt: str = ""
    verbose: bool = False
    use_markdown: bool = DEFAULT_USE_MARKDOWN
    auto_retry_model: bool = DEFAULT_AUTO_RETRY_MODEL
    stream: bool = DEFAULT_STREAM
    file: Optional[str] = None

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, value: str) -> str:
        return (value or "").strip().lower()

    @field_validator("model")
    @classmethod
    def _blank_model_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    def without_model(self) -> "RunConfig":
        """Return a copy with ``model`` cleared (used by the model retry)."""
        return self.model_copy(update={"model": None})


__all__ = ["RunConfig"]

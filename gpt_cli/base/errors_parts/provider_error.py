"""
Structured provider error exception type.

Every failure raised by the executor or an adapter is a :class:`ProviderError`
carrying the normalized ``{code?, message}`` pair plus the original payload, so
the run layer can decide between fallback, retry, and surfacing to the user.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a normalized failure of a provider call.

    Attributes:
        message: Human-readable error message (what the user sees).
        code: Provider-reported error code string when one was present
            (e.g., ``"model_not_supported"``), otherwise ``None``.
        provider: Provider key where the error originated (e.g., ``"copilot"``).
        model: Optional model name associated with the failure.
        kind: Classified :class:`ErrorCode` category.
        status: HTTP status code for transport failures.
        retryable: Hint for upstream logic (not authoritative).
        raw: Original thrown value or parsed error body for diagnostics.
    """

    message: str
    code: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    kind: ErrorCode = ErrorCode.UNKNOWN
    status: Optional[int] = None
    retryable: bool = False
    raw: Any = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    def describe(self) -> str:
        """Return a compact diagnostic line combining provider, model, kind, and message."""
        return f"{self.provider or '-'}:{self.model or '-'} {self.kind.value}: {self.message}"


__all__ = ["ProviderError"]

"""
Error classification helpers mapping failures to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, detection of
"model not supported" rejections, and message-based heuristics as a fallback
for transport exceptions that carry no status.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import httpx

from ..constants import MODEL_NOT_SUPPORTED_PHRASES
from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Any) -> Optional[int]:
    """Attempt to extract an HTTP status code from a failure value.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def classify_status(status: Optional[int]) -> Optional[ErrorCode]:
    """Map an HTTP status to an :class:`ErrorCode` (``None`` when unmapped)."""
    if status is None:
        return None
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    return ErrorCode.SERVER_ERROR if status >= 500 else None


def _error_text(err: Any) -> str:
    """Return the lower-cased ``code`` and ``message`` text of a failure."""
    if err is None:
        return ""
    if isinstance(err, str):
        return err.lower()
    code = getattr(err, "code", None)
    message = getattr(err, "message", None)
    if message is None:
        message = str(err)
    return f"{code or ''} {message}".lower()


def is_model_not_supported(err: Any, phrases: Optional[Iterable[str]] = None) -> bool:
    """Return True when ``err`` reports that the requested model was rejected.

    Matching is a case-insensitive substring test of the error's ``code`` and
    ``message`` against ``phrases`` (defaults to
    :data:`MODEL_NOT_SUPPORTED_PHRASES`).
    """
    if isinstance(err, ProviderError) and err.kind is ErrorCode.MODEL_NOT_SUPPORTED:
        return True
    text = _error_text(err)
    if not text.strip():
        return False
    candidates = MODEL_NOT_SUPPORTED_PHRASES if phrases is None else tuple(phrases)
    return any(p.lower() in text for p in candidates if p)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for failures without an HTTP status."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key", "auth")),
        (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "connection refused")),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
    )
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Any) -> ErrorCode:
    """Classify a failure into a normalized :class:`ErrorCode`.

    Precedence:
        1. ``ProviderError`` passthrough (when already classified).
        2. Model-not-supported phrases.
        3. Timeout and transport exceptions (stdlib and ``httpx``).
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError) and exc.kind is not ErrorCode.UNKNOWN:
        return exc.kind
    if is_model_not_supported(exc):
        return ErrorCode.MODEL_NOT_SUPPORTED
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    mapped = classify_status(status)
    if mapped is not None:
        return mapped
    code = _heuristic_from_message(_error_text(exc))
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_status",
    "is_model_not_supported",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

"""
Error normalization for arbitrary thrown values.

Provider endpoints and transport layers fail in many shapes: plain strings,
exceptions, nested ``{"error": {...}}`` envelopes, bare ``{"message", "code"}``
objects, or HTTP-response-like values. :func:`normalize_error` collapses all of
them into a :class:`NormalizedError` and never raises itself.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..constants import UNKNOWN_ERROR_MESSAGE
from .classification import classify_exception, classify_status
from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass(frozen=True)
class NormalizedError:
    """Uniform ``{code?, message}`` view of a failure plus the original value."""

    message: str
    code: Optional[str] = None
    original: Any = None

    def to_dict(self) -> dict:
        data = {"message": self.message}
        if self.code is not None:
            data["code"] = self.code
        return data


def _as_code(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def _dumps(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


def _from_envelope(inner: Mapping[str, Any]) -> tuple[Optional[str], str]:
    """Unwrap a provider-style ``{"error": {...}}`` envelope."""
    message = next(
        (inner[k] for k in ("message", "msg", "detail") if inner.get(k) is not None),
        None,
    )
    if message is None:
        message = _dumps(dict(inner))
    code = inner.get("code")
    if code is None:
        code = inner.get("type")
    return _as_code(code), str(message)


def _normalize_mapping(obj: Mapping[str, Any]) -> tuple[Optional[str], str]:
    inner = obj.get("error")
    if isinstance(inner, Mapping) and inner:
        return _from_envelope(inner)
    if obj.get("message") or obj.get("code"):
        message = obj.get("message")
        return _as_code(obj.get("code")), str(message) if message is not None else _dumps(dict(obj))
    if "status" in obj and "statusText" in obj:
        status = obj.get("status")
        status_text = obj.get("statusText") or ""
        return None, f"HTTP {status if status is not None else '?'} {status_text}".rstrip()
    return None, _dumps(dict(obj))


def normalize_error(err: Any) -> NormalizedError:
    """Collapse an arbitrary thrown value into a :class:`NormalizedError`.

    Rules (first match wins):
        1. ``None`` -> ``"unknown error"``.
        2. ``str`` -> used verbatim.
        3. Exceptions and objects exposing a ``message`` -> that message, plus
           a ``code`` attribute when present.
        4. ``{"error": {message|msg|detail, code|type}}`` envelopes.
        5. ``{"message", "code"}`` mappings.
        6. Response-like values (``{"status", "statusText"}`` mappings or
           objects with ``status_code``/``reason_phrase``) -> ``"HTTP <status> <text>"``.
        7. JSON text of the value, else ``str(value)``.
    """
    if err is None:
        return NormalizedError(message=UNKNOWN_ERROR_MESSAGE)
    if isinstance(err, str):
        return NormalizedError(message=err, original=err)
    if isinstance(err, ProviderError):
        return NormalizedError(message=err.message, code=err.code, original=err)
    if isinstance(err, BaseException):
        message = str(err) or type(err).__name__
        return NormalizedError(message=message, code=_as_code(getattr(err, "code", None)), original=err)
    if isinstance(err, Mapping):
        code, message = _normalize_mapping(err)
        return NormalizedError(message=message, code=code, original=err)
    message_attr = getattr(err, "message", None)
    if isinstance(message_attr, str):
        return NormalizedError(message=message_attr, code=_as_code(getattr(err, "code", None)), original=err)
    status_code = getattr(err, "status_code", None)
    if isinstance(status_code, int):
        reason = getattr(err, "reason_phrase", "") or ""
        return NormalizedError(message=f"HTTP {status_code} {reason}".rstrip(), original=err)
    return NormalizedError(message=_dumps(err), original=err)


def to_provider_error(
    err: Any,
    *,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    status: Optional[int] = None,
    kind: Optional[ErrorCode] = None,
) -> ProviderError:
    """Build a :class:`ProviderError` from any thrown value.

    Existing ``ProviderError`` instances are returned unchanged so that the
    first normalization wins as errors travel up the stack.
    """
    if isinstance(err, ProviderError):
        return err
    normalized = normalize_error(err)
    if kind is None:
        kind = classify_status(status) if status is not None else None
    if kind is None:
        shaped = ProviderError(message=normalized.message, code=normalized.code)
        kind = classify_exception(err) if isinstance(err, Exception) else classify_exception(shaped)
    return ProviderError(
        message=normalized.message,
        code=normalized.code,
        provider=provider,
        model=model,
        kind=kind,
        status=status,
        retryable=kind in (ErrorCode.RATE_LIMIT, ErrorCode.TRANSIENT, ErrorCode.UNAVAILABLE, ErrorCode.TIMEOUT),
        raw=err,
    )


__all__ = ["NormalizedError", "normalize_error", "to_provider_error"]

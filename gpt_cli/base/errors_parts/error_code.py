"""
Normalized error categories (taxonomy).

Defines the `ErrorCode` enumeration attached to every :class:`ProviderError`.
Values are lowercase snake_case and double as the ``error_code`` field in
structured log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories for chat calls."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    CONFIG = "config"
    PROTOCOL = "protocol"
    MODEL_NOT_SUPPORTED = "model_not_supported"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]

"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``gpt_cli.base.errors_parts`` so call sites keep a single import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_status, is_model_not_supported
from .errors_parts.normalize import NormalizedError, normalize_error, to_provider_error

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_status",
    "is_model_not_supported",
    "NormalizedError",
    "normalize_error",
    "to_provider_error",
]

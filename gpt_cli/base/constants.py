"""Base shared constants for the chat request layer.

Central location to avoid scattering magic strings and default numbers.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Fallback message when a thrown value carries nothing usable
UNKNOWN_ERROR_MESSAGE = "unknown error"

# Raised when a 2xx response lacks ``choices[0].message.content`` as a string
INVALID_RESPONSE_SHAPE = "invalid response shape from provider"

# SSE framing
SSE_EVENT_SEPARATOR = "\n\n"
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = "[DONE]"

# Provider phrases signalling that the requested model was rejected.
# Extendable at runtime through GPT_CLI_MODEL_NOT_SUPPORTED_PHRASES.
MODEL_NOT_SUPPORTED_PHRASES = (
    "model_not_supported",
    "model is not supported",
    "requested model is not supported",
    "unsupported model",
)

# Default HTTP timeout (seconds)
DEFAULT_HTTP_TIMEOUT = 60.0

__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "INVALID_RESPONSE_SHAPE",
    "SSE_EVENT_SEPARATOR",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "MODEL_NOT_SUPPORTED_PHRASES",
    "DEFAULT_HTTP_TIMEOUT",
]

"""Timeout configuration for HTTP transport.

The chat layer enforces no deadline of its own; the only timeout applied is
the one configured on pooled ``httpx`` clients. Values are parsed once from
the environment and cached.

Supported environment variables (all optional):
    GPT_CLI_HTTP_TIMEOUT_SECONDS
    GPT_CLI_CONNECT_TIMEOUT_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for each HTTP call.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    connect_timeout_seconds: float = 10.0

    def as_httpx(self):
        import httpx

        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: Optional[TimeoutConfig] = None


def _parse_seconds(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_seconds("GPT_CLI_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT),
            connect_timeout_seconds=_parse_seconds("GPT_CLI_CONNECT_TIMEOUT_SECONDS", 10.0),
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _CACHED
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config"]

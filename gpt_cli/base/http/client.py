"""Shared HTTP client pool and transport abstraction.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances used as
    the default transport when a caller does not inject one through
    ``ProviderOptions.fetcher``. Tests inject
    ``httpx.Client(transport=httpx.MockTransport(handler))`` instead.

Timeout strategy:
    The client's timeout derives from :func:`get_timeout_config` at the time
    of first creation and is cached with the client. No other deadline is
    enforced by the chat layer.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Purposes keep separate
      pools (e.g., "chat" vs "stream").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

# The transport contract: anything with httpx.Client's post/build_request/send.
Fetcher = httpx.Client

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL associated with the client. ``None``
            groups clients under a shared key; callers then pass absolute URLs.
        purpose: Short string discriminating separate pools (e.g., "chat",
            "stream"). Keep stable to maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().as_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def resolve_fetcher(fetcher: Optional[httpx.Client], purpose: str) -> httpx.Client:
    """Return the injected transport or a pooled default for ``purpose``."""
    return fetcher if fetcher is not None else get_httpx_client(None, purpose)


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown; close errors are non-actionable
                pass
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["Fetcher", "get_httpx_client", "resolve_fetcher", "close_all_clients"]

"""HTTP transport package.

Exposes the ``Fetcher`` transport contract and pooled httpx clients.
"""

from .client import Fetcher, close_all_clients, get_httpx_client, resolve_fetcher

__all__ = ["Fetcher", "get_httpx_client", "resolve_fetcher", "close_all_clients"]

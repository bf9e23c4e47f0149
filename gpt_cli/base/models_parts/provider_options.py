"""
ProviderOptions DTO handed from the run layer to adapters.

All secrets and endpoints reach adapters through this object; adapters never
read process environment themselves.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import httpx


@dataclass(frozen=True)
class ProviderOptions:
    """Resolved per-invocation provider options.

    Attributes:
        api_key: Bearer credential for the endpoint. Excluded from ``repr``.
        base_url: Endpoint base URL override.
        fetcher: HTTP transport used for the call. When ``None`` the executor
            borrows a pooled client from ``get_httpx_client``.
    """

    api_key: Optional[str] = field(default=None, repr=False)
    base_url: Optional[str] = None
    fetcher: Optional[httpx.Client] = field(default=None, repr=False, compare=False)


__all__ = ["ProviderOptions"]

"""Initialization dataclass for OpenAI-compatible adapters.

Pure data container describing how an adapter resolves its credential and
endpoint. No I/O occurs here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AdapterSpec:
    """Static description of one OpenAI-compatible provider.

    Attributes:
        provider: Canonical provider key (e.g. ``"copilot"``).
        api_key_name: Name of the credential, used in missing-field errors
            (e.g. ``"COPILOT_API_KEY"``).
        base_url_name: Name of the endpoint setting, used in missing-field
            errors (e.g. ``"COPILOT_API_BASE"``).
        default_base_url: Base used when options carry none; ``None`` makes
            the base URL mandatory.
        default_model: Model suggested when none is configured.
        require_api_key: When ``False``, calls proceed without a credential.
    """

    provider: str
    api_key_name: str
    base_url_name: str
    default_base_url: Optional[str] = None
    default_model: Optional[str] = None
    require_api_key: bool = True


__all__ = ["AdapterSpec"]

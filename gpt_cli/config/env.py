"""gpt_cli.config.env
==================

Environment variable names for provider credentials and endpoints.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variables that hold their API key and base URL (canonical and aliases).
- Small lookup helpers used by the configuration boundary. Adapters never
  call these; they receive resolved ``ProviderOptions``.

Design Notes
------------
- Canonical names live in ``ENV_MAP`` / ``BASE_ENV_MAP``. Providers accepting
  extra names list them in ``ENV_ALIASES`` with the canonical name first.
- Helpers never raise on unknown providers or unset variables; they return
  ``None`` and let the caller decide.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Provider -> API key env var
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "copilot": "COPILOT_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "test_adapter": "TEST_ADAPTER_API_KEY",
    "mock": "TEST_ADAPTER_API_KEY",
}

# Provider -> base URL env var
BASE_ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_BASE",
    "copilot": "COPILOT_API_BASE",
    "gemini": "GEMINI_API_BASE",
}

# Provider -> ordered tuple of acceptable API key env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

VERBOSE_ENV = "GPT_CLI_VERBOSE"
MODEL_PHRASES_ENV = "GPT_CLI_MODEL_NOT_SUPPORTED_PHRASES"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'your_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("your_")


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key variable names for a provider, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        candidate; ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def resolve_provider_base(provider: str) -> Optional[str]:
    """Return the base URL override from the environment, if any."""
    name = BASE_ENV_MAP.get((provider or "").lower())
    if not name:
        return None
    return os.environ.get(name) or None


def env_flag(name: str) -> bool:
    """Return True when ``name`` is set to a truthy value (``1``, ``true``, ``yes``, ``on``)."""
    return (os.environ.get(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str) -> Tuple[str, ...]:
    """Return the comma separated, stripped, non-empty items of ``name``."""
    raw = os.environ.get(name) or ""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


__all__ = [
    "ENV_MAP",
    "BASE_ENV_MAP",
    "ENV_ALIASES",
    "VERBOSE_ENV",
    "MODEL_PHRASES_ENV",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
    "resolve_provider_base",
    "env_flag",
    "env_list",
]

"""Adapter registry.

Purpose
-------
Resolve a provider name (lower-cased) to an adapter instance satisfying the
``ProviderAdapter`` contract. The mapping from name to implementation is
static; each adapter is imported, instantiated, and validated once when it is
registered, never per call.

External dependencies
---------------------
- Standard library only (``importlib``). Adapter modules are imported when a
  registry is built so that a broken adapter surfaces as a clear error.

Failure modes
-------------
- :class:`UnknownProviderError` for names with no registered adapter.
- :class:`InvalidAdapterError` when an adapter lacks a callable
  ``call_provider`` or exposes a non-callable ``chat_completion_stream``, or
  when its module or class cannot be loaded.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple


class AdapterRegistryError(Exception):
    """Base class for adapter lookup and registration failures."""


class UnknownProviderError(AdapterRegistryError):
    """Raised when no adapter is registered under the requested provider name."""


class InvalidAdapterError(AdapterRegistryError):
    """Raised when an adapter does not satisfy the adapter contract."""


# Canonical provider names -> import path, class name, constructor kwargs
_PROVIDERS: Dict[str, Dict[str, Any]] = {
    "openai": {"module": "gpt_cli.openai.client", "class": "OpenAIAdapter"},
    "copilot": {"module": "gpt_cli.copilot.client", "class": "CopilotAdapter"},
    "gemini": {"module": "gpt_cli.gemini.client", "class": "GeminiAdapter"},
    "test_adapter": {"module": "gpt_cli.mock.client", "class": "TestAdapter", "kwargs": {"provider": "test_adapter"}},
    "mock": {"module": "gpt_cli.mock.client", "class": "TestAdapter", "kwargs": {"provider": "mock"}},
}


def validate_adapter(adapter: Any, provider: str = "<unknown>") -> None:
    """Check that ``adapter`` implements the minimal adapter contract.

    Parameters
    ----------
    adapter:
        Candidate adapter object.
    provider:
        Name used in error messages.

    Raises
    ------
    InvalidAdapterError
        If ``call_provider`` is missing or not callable, or if
        ``chat_completion_stream`` is present but not callable.
    """
    if adapter is None or not callable(getattr(adapter, "call_provider", None)):
        raise InvalidAdapterError(
            f"Provider adapter '{provider}' must provide a 'call_provider(config, options)' method"
        )
    stream = getattr(adapter, "chat_completion_stream", None)
    if stream is not None and not callable(stream):
        raise InvalidAdapterError(
            f"Provider adapter '{provider}' exposes 'chat_completion_stream' but it is not callable"
        )


def supports_streaming(adapter: Any) -> bool:
    """Return True when the adapter exposes a callable ``chat_completion_stream``."""
    return callable(getattr(adapter, "chat_completion_stream", None))


def _load_adapter(provider: str, spec: Mapping[str, Any]) -> Any:
    module_path, class_name = spec["module"], spec["class"]
    try:
        mod = import_module(module_path)
    except ImportError as exc:
        raise InvalidAdapterError(
            f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
        ) from exc
    try:
        klass = getattr(mod, class_name)
    except AttributeError as exc:
        raise InvalidAdapterError(
            f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
        ) from exc
    return klass(**spec.get("kwargs", {}))


class AdapterRegistry:
    """Static provider-name to adapter mapping, validated at registration.

    Design notes
    ------------
    - Names are normalized with ``strip().lower()`` on registration and lookup.
    - ``AdapterRegistry()`` registers the built-in adapters; pass ``adapters``
      to build a registry from explicit instances (tests, embedding).
    """

    def __init__(self, adapters: Optional[Mapping[str, Any]] = None) -> None:
        self._adapters: Dict[str, Any] = {}
        if adapters is None:
            for name, spec in _PROVIDERS.items():
                self.register(name, _load_adapter(name, spec))
        else:
            for name, adapter in adapters.items():
                self.register(name, adapter)

    @staticmethod
    def _key(name: str) -> str:
        return (name or "").strip().lower()

    def register(self, name: str, adapter: Any) -> None:
        """Validate and register ``adapter`` under ``name``."""
        key = self._key(name)
        validate_adapter(adapter, key)
        self._adapters[key] = adapter

    def get(self, name: str) -> Any:
        """Return the adapter registered under ``name``."""
        key = self._key(name)
        try:
            return self._adapters[key]
        except KeyError:
            raise UnknownProviderError(
                f"Unknown provider '{name}' (supported: {', '.join(self.supported())})"
            ) from None

    def supported(self) -> Tuple[str, ...]:
        """Return the registered provider names in registration order."""
        return tuple(self._adapters.keys())


def supported_providers() -> Tuple[str, ...]:
    """Return the built-in provider names without importing any adapter."""
    return tuple(_PROVIDERS.keys())


__all__ = [
    "AdapterRegistry",
    "AdapterRegistryError",
    "UnknownProviderError",
    "InvalidAdapterError",
    "validate_adapter",
    "supports_streaming",
    "supported_providers",
]

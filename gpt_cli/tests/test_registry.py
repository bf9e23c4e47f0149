"""Unit tests for the adapter registry.

Covers:
- Built-in names resolve (case-insensitively) to adapter instances.
- Unknown names raise UnknownProviderError listing supported providers.
- Registration-time validation of the adapter contract.
"""
from __future__ import annotations

import types

import pytest

from gpt_cli.base.factory import (
    AdapterRegistry,
    InvalidAdapterError,
    UnknownProviderError,
    supported_providers,
    supports_streaming,
    validate_adapter,
)
from gpt_cli.copilot import CopilotAdapter
from gpt_cli.gemini import GeminiAdapter
from gpt_cli.mock import TestAdapter
from gpt_cli.openai import OpenAIAdapter


def test_builtin_registry_resolves_every_provider():
    registry = AdapterRegistry()
    assert isinstance(registry.get("openai"), OpenAIAdapter)  # nosec B101
    assert isinstance(registry.get("Copilot"), CopilotAdapter)  # nosec B101
    assert isinstance(registry.get(" GEMINI "), GeminiAdapter)  # nosec B101
    assert isinstance(registry.get("test_adapter"), TestAdapter)  # nosec B101
    assert registry.get("mock").provider_name == "mock"  # nosec B101
    assert registry.supported() == supported_providers()  # nosec B101


def test_adapters_are_built_once_per_registry():
    registry = AdapterRegistry()
    assert registry.get("openai") is registry.get("OPENAI")  # nosec B101


def test_unknown_provider_lists_supported_names():
    registry = AdapterRegistry()
    with pytest.raises(UnknownProviderError) as info:
        registry.get("nope")
    assert "nope" in str(info.value)  # nosec B101
    assert "copilot" in str(info.value)  # nosec B101
    assert "nope" not in registry.supported()  # nosec B101
    assert "gemini" in registry.supported()  # nosec B101


def test_registration_rejects_adapter_without_call_provider():
    with pytest.raises(InvalidAdapterError):
        AdapterRegistry({"broken": types.SimpleNamespace(chat_completion_stream=lambda r, o: iter(()))})


def test_registration_rejects_non_callable_stream_attribute():
    adapter = types.SimpleNamespace(call_provider=lambda c, o: None, chat_completion_stream="yes")
    with pytest.raises(InvalidAdapterError):
        validate_adapter(adapter, "odd")


def test_streaming_capability_is_optional():
    plain = types.SimpleNamespace(call_provider=lambda c, o: None)
    registry = AdapterRegistry({"Plain": plain})
    assert registry.get("plain") is plain  # nosec B101
    assert supports_streaming(plain) is False  # nosec B101
    assert supports_streaming(TestAdapter()) is True  # nosec B101


def test_validate_rejects_none():
    with pytest.raises(InvalidAdapterError):
        validate_adapter(None)

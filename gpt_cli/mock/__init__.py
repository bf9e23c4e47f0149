"""Test adapter package exposing deterministic canned output."""

from .client import DEFAULT_CHUNKS, TEST_ADAPTER_KEY_NAME, TestAdapter

__all__ = ["TestAdapter", "DEFAULT_CHUNKS", "TEST_ADAPTER_KEY_NAME"]

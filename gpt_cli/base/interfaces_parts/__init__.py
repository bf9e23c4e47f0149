"""Interfaces parts package: one Protocol per module."""

from .has_default_model import HasDefaultModel
from .provider_adapter import ProviderAdapter
from .supports_streaming import SupportsStreaming

__all__ = ["HasDefaultModel", "ProviderAdapter", "SupportsStreaming"]

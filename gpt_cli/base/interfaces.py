"""
Adapter interfaces (Protocols) for the chat layer.

Re-exports the single-class modules under ``gpt_cli.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import HasDefaultModel, ProviderAdapter, SupportsStreaming

__all__ = [
    "ProviderAdapter",
    "SupportsStreaming",
    "HasDefaultModel",
]

"""
OpenAI provider package.

Exports:
- OpenAIAdapter: OpenAI-compatible adapter for api.openai.com
"""

from .client import OPENAI_SPEC, OpenAIAdapter

__all__ = ["OpenAIAdapter", "OPENAI_SPEC"]

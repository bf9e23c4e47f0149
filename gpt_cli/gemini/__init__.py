"""
Gemini provider package.

Exports:
- GeminiAdapter: adapter for the Gemini OpenAI-compatible endpoint
"""

from .client import GEMINI_SPEC, GeminiAdapter

__all__ = ["GeminiAdapter", "GEMINI_SPEC"]

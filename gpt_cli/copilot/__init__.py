"""
Copilot provider package.

Exports:
- CopilotAdapter: OpenAI-compatible adapter for Copilot gateways
"""

from .client import COPILOT_SPEC, CopilotAdapter

__all__ = ["CopilotAdapter", "COPILOT_SPEC"]

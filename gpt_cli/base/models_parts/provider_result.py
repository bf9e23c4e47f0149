"""
ProviderResult DTO returned by non-streaming adapter calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProviderResult:
    """Completion returned by ``call_provider``.

    Exactly one of ``text`` or ``markdown`` is expected to be meaningful;
    consumers fall back from one to the other.
    """

    text: Optional[str] = None
    markdown: Optional[str] = None

    def preferred(self, use_markdown: bool) -> Optional[str]:
        """Return markdown first when ``use_markdown`` else text first, falling back to the other."""
        first, second = (self.markdown, self.text) if use_markdown else (self.text, self.markdown)
        return first or second


__all__ = ["ProviderResult"]

"""Structured logging context object.

:class:`LogContext` carries the fields shared by every event of one chat call
(provider, model, endpoint, streaming mode) and flattens them, together with
its ``extra`` mapping, into a ``None``-free dictionary.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for chat call logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    url: Optional[str] = None
    stream: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]

"""HasDefaultModel Protocol (single-class module).

Optional capability for adapters that suggest a model when none is configured.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for adapters that have a default model."""

    def default_model(self) -> Optional[str]:  # pragma: no cover - trivial
        """Return the default model identifier for the adapter, if any."""
        return None

"""Typed view of the user configuration file (``~/.gpt-cli/config.json``).

Unknown keys are ignored so that older or newer files still load. All fields
are optional; absent values leave the built-in defaults in place.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderSettings(BaseModel):
    """Per-provider credential and endpoint overrides."""

    model_config = ConfigDict(extra="ignore")

    api_key: Optional[str] = None
    base_url: Optional[str] = None


class FileConfig(BaseModel):
    """Contents of the gpt-cli configuration file."""

    model_config = ConfigDict(extra="ignore")

    default_provider: Optional[str] = None
    default_model: Optional[str] = None
    default_temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    default_system: Optional[str] = None
    provider_settings: Dict[str, ProviderSettings] = Field(default_factory=dict)

    def settings_for(self, provider: str) -> ProviderSettings:
        return self.provider_settings.get((provider or "").lower(), ProviderSettings())


__all__ = ["FileConfig", "ProviderSettings"]

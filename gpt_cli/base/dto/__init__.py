"""Validated DTOs for the CLI boundary."""

from .file_config import FileConfig, ProviderSettings
from .run_config import RunConfig

__all__ = [
    "FileConfig",
    "ProviderSettings",
    "RunConfig",
]

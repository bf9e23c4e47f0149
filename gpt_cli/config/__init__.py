"""Unified configuration layer for gpt-cli.

Goals
-----
* Centralize defaults (provider, models, temperature, system prompt).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``gpt_cli.config.defaults``)
    2. Config file (``GPT_CLI_CONFIG_FILE`` or ``~/.gpt-cli/config.json``)
    3. Environment variables (``<PROVIDER>_API_KEY``, ``<PROVIDER>_API_BASE``)
    4. Command-line flags
* Be the only place that reads credentials from the environment; adapters
  receive a resolved ``ProviderOptions``.

Config File
-----------
JSON is tried first, then YAML (PyYAML). Structure example::

    {
      "default_provider": "openai",
      "default_model": "gpt-4o-mini",
      "default_temperature": 0.3,
      "default_system": "You are terse.",
      "provider_settings": {
        "copilot": {"base_url": "https://copilot.example/v1"}
      }
    }

A missing, unreadable, or invalid file yields an empty configuration.

Public API
----------
* load_file_config(path=None) -> FileConfig
* build_provider_options(provider, file_config=None, fetcher=None) -> ProviderOptions
* resolve_run_config(file_config=None, **cli_values) -> RunConfig
* default_model_for(provider) -> str
* model_not_supported_phrases() -> tuple[str, ...]
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import httpx
import yaml
from pydantic import ValidationError

from ..base.constants import MODEL_NOT_SUPPORTED_PHRASES
from ..base.dto.file_config import FileConfig
from ..base.logging import get_logger, log_event
from ..base.models import ProviderOptions
from .defaults import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_PROVIDER,
    DEFAULT_TEMPERATURE,
    GLOBAL_DEFAULT_MODEL,
    PROVIDER_DEFAULT_MODELS,
)
from .env import MODEL_PHRASES_ENV, env_list, is_placeholder, resolve_provider_base, resolve_provider_key

CONFIG_FILE_ENV = "GPT_CLI_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"

if TYPE_CHECKING:
    from ..base.dto.run_config import RunConfig

_FILE_CACHE: Dict[str, FileConfig] = {}
_DOTENV_LOADED = False

_logger = get_logger("config")


def parse_dotenv_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(name, value)`` for one ``.env`` line, or ``None`` to skip it.

    Accepts an optional ``export`` prefix and one layer of matching quotes.
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    name, sep, value = text.partition("=")
    if not sep:
        return None
    name = name.strip()
    if name.startswith("export "):
        name = name[len("export "):].strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return (name, value) if name else None


def _load_dotenv_once() -> None:
    """Fill unset or placeholder environment variables from ``DOTENV_FILE``.

    Runs once per process (see :func:`reset_config_cache`); an unreadable file
    is logged and skipped.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = Path(os.getenv(DOTENV_FILE_ENV, ".env")).expanduser()
    if not path.is_file():
        return
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        log_event(_logger, "config.dotenv_unreadable", path=str(path), error=str(exc))
        return
    applied = []
    for pair in filter(None, map(parse_dotenv_line, lines)):
        name, value = pair
        if name not in os.environ or is_placeholder(os.environ.get(name)):
            os.environ[name] = value
            applied.append(name)
    log_event(_logger, "config.dotenv_loaded", path=str(path), keys=applied)


def config_file_path() -> Path:
    """Return the configured config file path (env override or home default)."""
    override = os.getenv(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _parse_config_text(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return yaml.safe_load(text)


def load_file_config(path: Optional[Path] = None) -> FileConfig:
    """Load and validate the config file, caching the result per path.

    Never raises: unreadable or invalid files are logged and treated as empty.
    """
    p = Path(path) if path is not None else config_file_path()
    key = str(p)
    if key in _FILE_CACHE:
        return _FILE_CACHE[key]
    cfg = FileConfig()
    if p.is_file():
        try:
            data = _parse_config_text(p.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                cfg = FileConfig.model_validate(data)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as exc:
            log_event(_logger, "config.file_invalid", path=key, error=str(exc))
    _FILE_CACHE[key] = cfg
    return cfg


def reset_config_cache() -> None:
    """Forget cached config files and the .env load marker (tests, reloads)."""
    global _DOTENV_LOADED
    _FILE_CACHE.clear()
    _DOTENV_LOADED = False


def default_model_for(provider: str) -> str:
    """Return the built-in default model for ``provider``."""
    return PROVIDER_DEFAULT_MODELS.get((provider or "").lower(), GLOBAL_DEFAULT_MODEL)


def build_provider_options(
    provider: str,
    file_config: Optional[FileConfig] = None,
    fetcher: Optional[httpx.Client] = None,
) -> ProviderOptions:
    """Resolve credential and endpoint for ``provider``.

    Environment variables win over ``provider_settings`` from the config
    file. Values that look like placeholders are ignored.
    """
    _load_dotenv_once()
    settings = (file_config or FileConfig()).settings_for(provider)
    api_key, _ = resolve_provider_key(provider)
    if not api_key and settings.api_key and not is_placeholder(settings.api_key):
        api_key = settings.api_key
    base_url = resolve_provider_base(provider) or settings.base_url
    return ProviderOptions(api_key=api_key, base_url=base_url, fetcher=fetcher)


def resolve_run_config(file_config: Optional[FileConfig] = None, **cli_values: Any) -> RunConfig:
    """Merge CLI values over config-file defaults into a validated ``RunConfig``.

    ``None`` CLI values mean "not given" and fall back to the config file,
    then to built-in defaults.
    """
    # dto.run_config imports config.defaults, which runs this package first
    from ..base.dto.run_config import RunConfig

    fc = file_config or FileConfig()
    values = {k: v for k, v in cli_values.items() if v is not None}
    values.setdefault("provider", fc.default_provider or DEFAULT_PROVIDER)
    if "model" not in values and fc.default_model:
        values["model"] = fc.default_model
    if "temperature" not in values:
        values["temperature"] = fc.default_temperature if fc.default_temperature is not None else DEFAULT_TEMPERATURE
    if not values.get("system") and fc.default_system:
        values["system"] = fc.default_system
    return RunConfig(**values)


def model_not_supported_phrases() -> Tuple[str, ...]:
    """Return the built-in rejection phrases plus any from the environment."""
    extra = env_list(MODEL_PHRASES_ENV)
    return tuple(dict.fromkeys(MODEL_NOT_SUPPORTED_PHRASES + extra))


__all__ = [
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "config_file_path",
    "load_file_config",
    "reset_config_cache",
    "default_model_for",
    "build_provider_options",
    "resolve_run_config",
    "model_not_supported_phrases",
    "parse_dotenv_line",
]

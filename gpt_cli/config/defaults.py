"""gpt_cli.config.defaults
=====================

Central place for small, stable default values used across gpt-cli. They can
be overridden by the config file, environment variables, or CLI flags, and
provide sensible fallbacks for local development and tests.

This module intentionally imports nothing from the rest of the package so
that any layer may depend on it without cycles. Only plain constants live
here.
"""

from __future__ import annotations

# ---- Run defaults ----
DEFAULT_PROVIDER = "copilot"
DEFAULT_TEMPERATURE = 0.6
DEFAULT_USE_MARKDOWN = True
DEFAULT_AUTO_RETRY_MODEL = False
DEFAULT_STREAM = False

DEFAULT_SYSTEM_PROMPT = (
    "You are an AI assistant called via CLI. Respond concisely and clearly, "
    "focusing only on the user's prompt. Include only very brief explanations "
    "unless explicitly asked."
)

# Model used when neither flags nor the config file choose one.
GLOBAL_DEFAULT_MODEL = "gpt-4o-mini"
GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"
PROVIDER_DEFAULT_MODELS = {
    "gemini": GEMINI_DEFAULT_MODEL,
}

# ---- Endpoint defaults ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai"

# ---- Config file ----
CONFIG_DIR_NAME = ".gpt-cli"
CONFIG_FILE_NAME = "config.json"


__all__ = [
    "DEFAULT_PROVIDER",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_USE_MARKDOWN",
    "DEFAULT_AUTO_RETRY_MODEL",
    "DEFAULT_STREAM",
    "DEFAULT_SYSTEM_PROMPT",
    "GLOBAL_DEFAULT_MODEL",
    "GEMINI_DEFAULT_MODEL",
    "PROVIDER_DEFAULT_MODELS",
    "OPENAI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_BASE_URL",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
]

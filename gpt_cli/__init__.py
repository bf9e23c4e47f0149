"""gpt_cli package

Command line client for OpenAI-compatible chat completion APIs.

Purpose:
    Send one prompt to a configured provider (OpenAI, Copilot, Gemini, or the
    offline test adapter) and print the reply, streaming when possible.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Run layer entrypoint: ``gpt_cli.service.runner.run_core``
    - Command line entrypoint: ``gpt_cli.service.cli.main``
"""

from .base.errors import ErrorCode, ProviderError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
]

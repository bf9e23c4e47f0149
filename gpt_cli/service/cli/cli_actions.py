"""CLI action handlers.

Purpose
-------
Turn parsed arguments into a resolved run: assemble the prompt, merge
configuration sources, build provider options, and hand off to the runner.
This module has no top-level side effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- Every failure is reported as a single ``Error: <message>`` line on stderr
  with exit code ``1``. With ``--verbose`` the traceback follows.
- Completion text goes to stdout only; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import os
import sys
import traceback
from typing import Iterable, Optional, TextIO

import httpx
from pydantic import ValidationError

from ...base.factory import AdapterRegistry
from ...base.logging import configure_logger, get_logger, log_event
from ...config import (
    build_provider_options,
    load_file_config,
    model_not_supported_phrases,
    resolve_run_config,
)
from ...config.env import VERBOSE_ENV, env_flag
from ..render import render_markdown
from ..runner import Writer, run_core

EXIT_OK = 0
EXIT_FAILURE = 1

LOG_FILE_ENV = "GPT_CLI_LOG_FILE"

_logger = get_logger("cli")


def read_stdin_prompt(stdin: Optional[TextIO]) -> str:
    """Return piped stdin content, or ``""`` for a terminal or closed stream."""
    if stdin is None or stdin.closed:
        return ""
    isatty = getattr(stdin, "isatty", None)
    if callable(isatty) and isatty():
        return ""
    return stdin.read().strip()


def collect_prompt(words: Optional[Iterable[str]], file: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Assemble the prompt from positional words (or stdin) and ``--file``.

    Raises
    ------
    OSError
        When ``file`` cannot be read.
    """
    prompt = " ".join(w for w in words or () if w).strip()
    if not prompt:
        prompt = read_stdin_prompt(stdin)
    if file:
        with open(file, "r", encoding="utf-8") as fh:
            content = fh.read()
        prompt = f"{prompt}\n\n{content}" if prompt else content
    return prompt


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for item in exc.errors():
        loc = ".".join(str(x) for x in item.get("loc", ()))
        parts.append(f"{loc}: {item.get('msg')}" if loc else str(item.get("msg")))
    return "invalid configuration: " + "; ".join(parts)


def error_message(exc: BaseException) -> str:
    """Return the one-line message shown to the user for ``exc``."""
    if isinstance(exc, ValidationError):
        return _format_validation_error(exc)
    if isinstance(exc, OSError) and exc.filename:
        return f"cannot read {exc.filename}: {exc.strerror or exc}"
    return str(exc) or type(exc).__name__


def report_error(exc: BaseException, *, verbose: bool, stderr: Optional[TextIO] = None) -> int:
    """Print ``Error: <message>`` (plus traceback when verbose) and return ``1``."""
    stream = stderr or sys.stderr
    print(f"Error: {error_message(exc)}", file=stream)
    if verbose:
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=stream)
    return EXIT_FAILURE


def is_verbose(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "verbose", None)) or env_flag(VERBOSE_ENV)


def handle_run(
    args: argparse.Namespace,
    prompt: str,
    *,
    registry: Optional[AdapterRegistry] = None,
    fetcher: Optional[httpx.Client] = None,
    write: Optional[Writer] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Execute one chat invocation for the parsed ``args``.

    Parameters
    ----------
    args: argparse.Namespace
        Parsed CLI arguments (see ``cli_parser.build_parser``).
    prompt: str
        Fully assembled prompt text.
    registry, fetcher, write, stderr:
        Injection points for tests; default to the built-in adapters, the
        pooled HTTP client, stdout and stderr.

    Returns
    -------
    int
        ``0`` on success, ``1`` on any run failure.
    """
    verbose = is_verbose(args)
    if verbose:
        configure_logger(level="DEBUG", file_path=os.getenv(LOG_FILE_ENV))
    try:
        file_config = load_file_config()
        config = resolve_run_config(
            file_config,
            provider=args.provider,
            model=args.model,
            temperature=args.temperature,
            system=args.system,
            prompt=prompt,
            verbose=verbose,
            use_markdown=args.markdown,
            auto_retry_model=args.retry_model,
            stream=args.stream,
            file=args.file,
        )
        log_event(
            _logger,
            "cli.config",
            provider=config.provider,
            model=config.model,
            stream=config.stream,
            use_markdown=config.use_markdown,
            auto_retry_model=config.auto_retry_model,
        )
        options = build_provider_options(config.provider, file_config, fetcher)
        run_core(
            config,
            options,
            registry=registry,
            write=write,
            renderer=render_markdown if config.use_markdown else None,
            phrases=model_not_supported_phrases(),
        )
    except Exception as exc:  # noqa: BLE001 - every failure becomes one error line
        return report_error(exc, verbose=verbose, stderr=stderr)
    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_FAILURE",
    "LOG_FILE_ENV",
    "collect_prompt",
    "read_stdin_prompt",
    "error_message",
    "report_error",
    "handle_run",
]

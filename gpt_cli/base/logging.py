"""Base structured logging utilities for gpt-cli.

Rationale:
- Central place to configure consistent JSON (or plain) logging on stderr so
  diagnostics never interleave with completion text written to stdout.
- Avoid ad-hoc logger setup across adapters and the run layer.

``normalized_log_event`` wraps ``log_event`` and injects canonical keys across
components: ``structured`` (bool), ``phase`` (str), ``attempt`` (int|None),
``error_code`` (str|None) and ``emitted`` (bool|None).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "gpt_cli"
LOG_LEVEL_ENV = "GPT_CLI_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_gpt_cli_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_gpt_cli_console_handler"
_FILE_HANDLER_ATTR = "_gpt_cli_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``gpt_cli`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    """Return the base logger or one of its children (``gpt_cli.<component>``)."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused). When ``None``, any managed file handler is removed.
    json_mode: bool
        Whether handlers use the JSON formatter or the plain text format.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    logger = get_logger(json_mode=json_mode)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)
    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setFormatter(_make_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            h.setLevel(logger.level)
            h.setFormatter(_make_formatter(json_mode))
            return logger
        logger.removeHandler(h)
        with contextlib.suppress(Exception):  # pragma: no cover - best-effort close
            h.close()
    if abs_path is None:
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    fh = RotatingFileHandler(abs_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_make_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.DEBUG,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (JSON formatted by ``get_logger``).
    event: str
        Event name (e.g. ``stream.start``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    level: int
        Logging level for the record. Defaults to ``DEBUG`` so events only
        surface in verbose runs.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "emitted",
)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    level: int = logging.DEBUG,
    **extra_fields: Any,
) -> None:
    """Emit a normalized structured log event with required keys.

    ``error_code`` is omitted when ``None`` so that "no error" reads naturally;
    the other required keys are always present. ``extra_fields`` never
    overwrite the normalized values.
    """
    base_fields: Dict[str, Any] = {
        "structured": True,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]

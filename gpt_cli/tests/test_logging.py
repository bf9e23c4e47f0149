"""Focused tests for gpt_cli.base.logging.

Covers:
- _parse_level string parsing
- get_logger naming under the shared base logger
- log_event / normalized_log_event payload shapes
- JsonFormatter output
- configure_logger level and file handler management
"""
from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

from gpt_cli.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from gpt_cli.base.log_support import JsonFormatter, LogContext


def test_parse_level_variants():
    assert _parse_level(None) == logging.WARNING  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_child_loggers_share_the_base_prefix():
    assert get_logger("run").name == f"{BASE_LOGGER_NAME}.run"  # nosec B101
    assert get_logger("gpt_cli.cli").name == "gpt_cli.cli"  # nosec B101
    assert get_logger().name == BASE_LOGGER_NAME  # nosec B101
    assert get_logger().propagate is False  # nosec B101


def test_log_event_drops_none_and_merges_context(log_events):
    logger = get_logger("tests.logging")
    ctx = LogContext(provider="openai", model=None, url="https://x", extra={"attempt_id": "a1"})
    log_event(logger, "chat.request", ctx, status=None, size=3)
    (event,) = [e for e in log_events.events() if e["event"] == "chat.request"]
    assert event == {"event": "chat.request", "provider": "openai", "url": "https://x", "attempt_id": "a1", "size": 3}  # nosec B101


def test_log_event_is_skipped_below_level():
    logger = get_logger("tests.quiet")
    records = []
    handler = logging.Handler()
    handler.emit = records.append  # type: ignore[assignment]
    base = get_logger()
    base.addHandler(handler)
    try:
        base.setLevel(logging.WARNING)
        log_event(logger, "hidden")
        log_event(logger, "shown", level=logging.ERROR)
    finally:
        base.removeHandler(handler)
    assert [json.loads(r.getMessage())["event"] for r in records] == ["shown"]  # nosec B101


def test_normalized_log_event_emits_required_keys(log_events):
    logger = get_logger("tests.normalized")
    normalized_log_event(logger, "run.done", LogContext(provider="p"), phase="finalize", attempt=1, emitted=True, phase_override="x")
    (event,) = [e for e in log_events.events() if e["event"] == "run.done"]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in event  # nosec B101
    assert event["structured"] is True and event["phase"] == "finalize"  # nosec B101
    assert "error_code" not in event  # nosec B101
    assert event["phase_override"] == "x"  # nosec B101


def test_normalized_log_event_keeps_error_code_and_none_values(log_events):
    logger = get_logger("tests.normalized")
    normalized_log_event(logger, "chat.error", phase="error", error_code="auth", phase2=None)
    (event,) = [e for e in log_events.events() if e["event"] == "chat.error"]
    assert event["error_code"] == "auth"  # nosec B101
    assert event["attempt"] is None and event["emitted"] is None  # nosec B101
    assert "phase2" not in event  # nosec B101


def test_json_formatter_hoists_structured_keys():
    record = logging.LogRecord("gpt_cli.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "k": 1}), None, None)
    data = json.loads(JsonFormatter().format(record))
    assert data["event"] == "e" and data["k"] == 1  # nosec B101
    assert data["level"] == "INFO" and data["logger"] == "gpt_cli.x"  # nosec B101
    assert "msg" not in data  # nosec B101


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord("gpt_cli.x", logging.WARNING, __file__, 1, "plain %s", ("text",), None)
    data = json.loads(JsonFormatter().format(record))
    assert data["msg"] == "plain text"  # nosec B101


def test_configure_logger_sets_level_and_file_handler(tmp_path):
    path = tmp_path / "logs" / "gpt-cli.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        assert logger.level == logging.DEBUG  # nosec B101
        log_event(get_logger("tests.file"), "to.file")
        for h in logger.handlers:
            h.flush()
        assert '"event": "to.file"' in path.read_text(encoding="utf-8")  # nosec B101
    finally:
        configure_logger(level="WARNING", file_path=None)
    assert not any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == str(path) for h in logger.handlers
    )  # nosec B101


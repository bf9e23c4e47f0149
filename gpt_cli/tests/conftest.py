"""Pytest configuration for the gpt-cli test suite.

Every test runs with a scrubbed environment (no real credentials, no user
config file, no ``.env``), an empty HTTP client pool, and the shared logger
restored to its default level afterwards.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, List

import httpx
import pytest

from gpt_cli.base.http import close_all_clients
from gpt_cli.base.logging import BASE_LOGGER_NAME, get_logger
from gpt_cli.config import reset_config_cache

_SCRUBBED_ENV = (
    "OPENAI_API_KEY",
    "OPENAI_API_BASE",
    "COPILOT_API_KEY",
    "COPILOT_API_BASE",
    "GEMINI_API_KEY",
    "GEMINI_API_BASE",
    "GOOGLE_API_KEY",
    "TEST_ADAPTER_API_KEY",
    "GPT_CLI_VERBOSE",
    "GPT_CLI_LOG_LEVEL",
    "GPT_CLI_LOG_FILE",
    "GPT_CLI_MODEL_NOT_SUPPORTED_PHRASES",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Point config and .env lookups at empty temp paths and drop credentials."""
    for name in _SCRUBBED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GPT_CLI_CONFIG_FILE", str(tmp_path / "missing-config.json"))
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    logger = get_logger()
    level = logger.level
    handler_levels = [(h, h.level) for h in logger.handlers]
    yield
    reset_config_cache()
    close_all_clients()
    logger.setLevel(level)
    for h, lvl in handler_levels:
        h.setLevel(lvl)
    logger.handlers[:] = [h for h, _ in handler_levels]


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        out = []
        for record in self.records:
            try:
                out.append(json.loads(record.getMessage()))
            except ValueError:
                continue
        return out


@pytest.fixture()
def log_events() -> Iterator[_ListHandler]:
    """Collect structured events emitted anywhere under the ``gpt_cli`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    get_logger()
    handler = _ListHandler()
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture()
def make_client() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]]:
    """Build ``httpx.Client`` instances backed by ``httpx.MockTransport``."""
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()

"""CLI surface: prompt assembly, exit codes, error reporting."""
from __future__ import annotations

import io
import json
from typing import List

import httpx
import pytest

from gpt_cli.base.factory import AdapterRegistry
from gpt_cli.mock import TestAdapter
from gpt_cli.service.cli import build_parser, main
from gpt_cli.service.cli.cli_actions import collect_prompt, error_message, handle_run, read_stdin_prompt
from helpers import completion


def _run(argv, prompt="hello", **kwargs):
    out: List[str] = []
    err = io.StringIO()
    args = build_parser().parse_intermixed_args(argv)
    code = handle_run(args, prompt, write=out.append, stderr=err, **kwargs)
    return code, "".join(out), err.getvalue()


def test_parser_defaults_leave_flags_unset():
    args = build_parser().parse_intermixed_args(["tell", "me", "a", "joke"])
    assert args.prompt == ["tell", "me", "a", "joke"]  # nosec B101
    assert args.stream is None and args.markdown is None and args.retry_model is None  # nosec B101
    assert args.provider is None and args.temperature is None  # nosec B101


def test_boolean_flags_do_not_consume_prompt_words():
    args = build_parser().parse_intermixed_args(["--stream", "hello", "--no-markdown", "world"])
    assert args.stream is True and args.markdown is False  # nosec B101
    assert args.prompt == ["hello", "world"]  # nosec B101


def test_conflicting_boolean_flags_are_rejected():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_intermixed_args(["--stream", "--no-stream"])
    assert info.value.code == 2  # nosec B101


def test_unknown_flag_is_a_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"], stdin=io.StringIO(""))
    assert info.value.code == 2  # nosec B101


def test_no_prompt_prints_help(capsys):
    assert main([], stdin=io.StringIO("")) == 0  # nosec B101
    assert "usage: gpt-cli" in capsys.readouterr().out  # nosec B101


def test_main_runs_test_adapter_end_to_end(capsys, monkeypatch):
    monkeypatch.setenv("TEST_ADAPTER_API_KEY", "k")
    assert main(["--provider", "test_adapter", "--no-markdown", "hi"], stdin=io.StringIO("")) == 0  # nosec B101
    captured = capsys.readouterr()
    assert captured.out == "chunk-1chunk-2\n"  # nosec B101
    assert captured.err == ""  # nosec B101


def test_main_reads_piped_stdin(capsys, monkeypatch):
    monkeypatch.setenv("TEST_ADAPTER_API_KEY", "k")
    assert main(["--provider", "mock", "--stream"], stdin=io.StringIO("from a pipe\n")) == 0  # nosec B101
    assert capsys.readouterr().out == "chunk-1chunk-2\n"  # nosec B101


def test_missing_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main(["--file", str(missing), "hi"], stdin=io.StringIO("")) == 1  # nosec B101
    err = capsys.readouterr().err
    assert err.startswith("Error: cannot read")  # nosec B101
    assert "nope.txt" in err  # nosec B101


def test_collect_prompt_appends_file_contents(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert collect_prompt(["summarize"], str(path)) == "summarize\n\nline one\nline two\n"  # nosec B101
    assert collect_prompt([], str(path), stdin=io.StringIO("")) == "line one\nline two\n"  # nosec B101


def test_collect_prompt_prefers_words_over_stdin():
    assert collect_prompt(["a", "b"], None, stdin=io.StringIO("ignored")) == "a b"  # nosec B101
    assert collect_prompt([], None, stdin=io.StringIO("  piped  ")) == "piped"  # nosec B101


def test_read_stdin_prompt_ignores_terminals_and_closed_streams():
    class _Tty(io.StringIO):
        def isatty(self) -> bool:
            return True

    closed = io.StringIO("x")
    closed.close()
    assert read_stdin_prompt(_Tty("typed")) == ""  # nosec B101
    assert read_stdin_prompt(closed) == ""  # nosec B101
    assert read_stdin_prompt(None) == ""  # nosec B101


def test_handle_run_success_with_injected_registry(monkeypatch):
    monkeypatch.setenv("TEST_ADAPTER_API_KEY", "k")
    registry = AdapterRegistry({"test_adapter": TestAdapter(chunks=["a", "b"])})
    code, out, err = _run(["--provider", "test_adapter", "--stream"], registry=registry)
    assert code == 0  # nosec B101
    assert out == "ab\n"  # nosec B101
    assert err == ""  # nosec B101


def test_handle_run_missing_key_exits_one():
    code, out, err = _run(["--provider", "test_adapter"])
    assert code == 1  # nosec B101
    assert out == ""  # nosec B101
    assert err.strip() == "Error: TEST_ADAPTER_API_KEY required"  # nosec B101


def test_handle_run_invalid_temperature():
    code, _, err = _run(["--provider", "test_adapter", "--temperature", "5"])
    assert code == 1  # nosec B101
    assert err.startswith("Error: invalid configuration: temperature")  # nosec B101


def test_handle_run_unknown_provider():
    code, _, err = _run(["--provider", "nope"])
    assert code == 1  # nosec B101
    assert "nope" in err  # nosec B101


def test_handle_run_uses_injected_fetcher(monkeypatch, make_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion("from the wire"))

    monkeypatch.setenv("OPENAI_API_KEY", "k")
    code, out, _ = _run(
        ["--provider", "openai", "--model", "gpt-4o", "--no-markdown", "--system", "sys"],
        prompt="ping",
        fetcher=make_client(handler),
    )
    assert code == 0  # nosec B101
    assert out == "from the wire\n"  # nosec B101
    assert seen["body"]["model"] == "gpt-4o"  # nosec B101
    assert seen["body"]["messages"] == [  # nosec B101
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "ping"},
    ]


def test_handle_run_http_error_is_one_line(monkeypatch, make_client):
    monkeypatch.setenv("OPENAI_API_KEY", "k")
    client = make_client(lambda r: httpx.Response(401, json={"error": {"message": "bad key"}}))
    code, out, err = _run(["--provider", "openai"], fetcher=client)
    assert code == 1 and out == ""  # nosec B101
    assert err.startswith("Error: ")  # nosec B101
    assert len(err.strip().splitlines()) == 1  # nosec B101


def test_verbose_env_adds_traceback(monkeypatch):
    monkeypatch.setenv("GPT_CLI_VERBOSE", "1")
    code, _, err = _run(["--provider", "test_adapter"])
    assert code == 1  # nosec B101
    assert "Traceback" in err  # nosec B101


def test_error_message_for_plain_exception():
    assert error_message(RuntimeError()) == "RuntimeError"  # nosec B101
    assert error_message(ValueError("boom")) == "boom"  # nosec B101


def test_options_between_prompt_words(capsys, monkeypatch):
    monkeypatch.setenv("TEST_ADAPTER_API_KEY", "k")
    code = main(["--provider", "test_adapter", "explain", "--no-markdown", "this"], stdin=io.StringIO(""))
    assert code == 0  # nosec B101
    assert capsys.readouterr().out == "chunk-1chunk-2\n"  # nosec B101


def test_prompt_words_after_valued_option():
    args = build_parser().parse_intermixed_args(["explain", "--model", "gpt-4o", "this", "please"])
    assert args.model == "gpt-4o"  # nosec B101
    assert args.prompt == ["explain", "this", "please"]  # nosec B101

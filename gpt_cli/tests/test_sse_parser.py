"""SSE parser behavior.

Covers:
- delta extraction (delta.content, message.content fallback, skips)
- [DONE] termination and discarding of trailing bytes
- malformed frames, missing reader, UTF-8 split across chunks
- flush of an unterminated final event
- exactly-once release on every exit path
"""
from __future__ import annotations

from typing import Iterator, List

import pytest

from gpt_cli.base.streaming import SSEStreamParser, extract_delta, iter_sse_deltas
from helpers import delta, sse_body


class _Release:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def _chunks(data: bytes, size: int) -> List[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


def test_extract_delta_prefers_delta_content():
    assert extract_delta('{"choices":[{"delta":{"content":"a"},"message":{"content":"b"}}]}') == "a"  # nosec B101


def test_extract_delta_falls_back_to_message_content():
    assert extract_delta('{"choices":[{"message":{"content":"full"}}]}') == "full"  # nosec B101


@pytest.mark.parametrize(
    "payload",
    ["not-json", "[]", '{"choices":[]}', '{"choices":[{"delta":{"content":5}}]}', '{"choices":[{"delta":{}}]}'],
)
def test_extract_delta_skips_unusable_payloads(payload):
    assert extract_delta(payload) is None  # nosec B101


@pytest.mark.parametrize("size", [1, 3, 7, 64, 4096])
def test_concatenation_matches_frames_for_any_chunking(size):
    parts = ["Hel", "lo, ", "wor", "ld!"]
    body = sse_body(*(delta(p) for p in parts))
    out = list(iter_sse_deltas(iter(_chunks(body, size))))
    assert out == parts  # nosec B101
    assert "".join(out) == "Hello, world!"  # nosec B101


def test_done_terminates_and_discards_trailing_bytes():
    body = sse_body(delta("one")) + sse_body(delta("never"), done=False)
    assert list(iter_sse_deltas(iter([body]))) == ["one"]  # nosec B101


def test_done_inside_same_event_stops_remaining_lines():
    body = b'data: {"choices":[{"delta":{"content":"a"}}]}\ndata: [DONE]\ndata: {"choices":[{"delta":{"content":"b"}}]}\n\n'
    assert list(iter_sse_deltas(iter([body]))) == ["a"]  # nosec B101


def test_malformed_frame_between_valid_frames_is_skipped():
    body = (
        sse_body(delta("good1"), done=False)
        + b"data: not-json\n\n"
        + sse_body(delta("good2"))
    )
    assert list(iter_sse_deltas(iter([body]))) == ["good1", "good2"]  # nosec B101


def test_non_data_lines_and_crlf_are_ignored():
    body = b': keep-alive\r\nevent: message\r\ndata: {"choices":[{"delta":{"content":"x"}}]}\r\n\n\ndata: [DONE]\n\n'
    assert list(iter_sse_deltas(iter([body]))) == ["x"]  # nosec B101


def test_no_reader_yields_nothing_and_still_releases():
    release = _Release()
    assert list(iter_sse_deltas(None, release=release)) == []  # nosec B101
    assert release.calls == 1  # nosec B101


def test_multibyte_character_split_across_chunks():
    body = sse_body(delta("héllo ✓"))
    idx = body.index("✓".encode("utf-8")) + 1
    out = list(iter_sse_deltas(iter([body[:idx], body[idx:]])))
    assert out == ["héllo ✓"]  # nosec B101


def test_unterminated_final_event_is_flushed():
    body = b'data: {"choices":[{"delta":{"content":"tail"}}]}'
    assert list(iter_sse_deltas(iter([body]))) == ["tail"]  # nosec B101


def test_parser_feed_and_flush_state():
    parser = SSEStreamParser()
    assert parser.feed(b'data: {"choices":[{"delta":{"content":"a"}}]}\n') == []  # nosec B101
    assert parser.feed(b"\n") == ["a"]  # nosec B101
    assert parser.flush() == []  # nosec B101
    assert parser.done is True  # nosec B101
    assert parser.feed(sse_body(delta("late"))) == []  # nosec B101


def test_release_once_on_normal_end():
    release = _Release()
    out = list(iter_sse_deltas(iter([sse_body(delta("a"), delta("b"))]), release=release))
    assert out == ["a", "b"]  # nosec B101
    assert release.calls == 1  # nosec B101


def test_release_once_without_done_sentinel():
    release = _Release()
    list(iter_sse_deltas(iter([sse_body(delta("a"), done=False)]), release=release))
    assert release.calls == 1  # nosec B101


def test_release_once_on_early_consumer_exit():
    release = _Release()
    stream = iter_sse_deltas(iter([sse_body(delta("a"), delta("b"), delta("c"))]), release=release)
    assert next(stream) == "a"  # nosec B101
    stream.close()
    stream.close()
    assert release.calls == 1  # nosec B101
    assert list(stream) == []  # nosec B101


def test_release_when_closed_before_first_item():
    release = _Release()
    stream = iter_sse_deltas(iter([sse_body(delta("a"))]), release=release)
    stream.close()
    assert release.calls == 1  # nosec B101


def test_release_once_when_reader_raises():
    release = _Release()

    def failing() -> Iterator[bytes]:
        yield sse_body(delta("a"), done=False)
        raise ConnectionError("reset by peer")

    stream = iter_sse_deltas(failing(), release=release)
    assert next(stream) == "a"  # nosec B101
    with pytest.raises(ConnectionError):
        next(stream)
    assert release.calls == 1  # nosec B101


def test_context_manager_releases():
    release = _Release()
    with iter_sse_deltas(iter([sse_body(delta("a"))]), release=release) as stream:
        assert next(stream) == "a"  # nosec B101
    assert release.calls == 1  # nosec B101


def test_parsers_do_not_share_buffers():
    first, second = SSEStreamParser(), SSEStreamParser()
    first.feed(b'data: {"choices":[{"delta":{"content":"one"}}]}')
    assert second.feed(b"\n\n") == []  # nosec B101
    assert first.feed(b"\n\n") == ["one"]  # nosec B101


@pytest.mark.parametrize("size", [1, 2, 5, 1024])
def test_crlf_framed_events_are_delivered_before_close(size):
    body = b'data: {"choices":[{"delta":{"content":"a"}}]}\r\n\r\ndata: [DONE]\r\n\r\n'
    parser = SSEStreamParser()
    out: List[str] = []
    for piece in _chunks(body, size):
        out.extend(parser.feed(piece))
    assert out == ["a"]  # nosec B101
    assert parser.done is True  # nosec B101

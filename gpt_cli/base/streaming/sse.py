"""Server-Sent-Events parser for OpenAI-style chat completion streams.

Purpose
-------
Turn a raw byte stream into a lazy, finite, single-pass sequence of text
deltas. Each parser instance owns its decoder state and pending-text buffer;
nothing is shared between concurrent streams.

Framing rules
-------------
- Bytes are decoded incrementally as UTF-8 so multi-byte characters may
  straddle chunk boundaries.
- ``\\r\\n`` is read as ``\\n``, so ``\\n\\n`` and ``\\r\\n\\r\\n`` both delimit one
  event; only lines starting with ``data:`` are considered.
- A ``[DONE]`` payload ends the sequence immediately and discards anything
  still buffered.
- A payload contributes ``choices[0].delta.content``, falling back to
  ``choices[0].message.content``. Invalid JSON or a non-string delta skips the
  line silently.
- When the source ends, leftover buffered text is processed once as a final,
  unterminated event.

Resource release
----------------
:func:`iter_sse_deltas` calls its ``release`` hook exactly once on normal end,
on ``[DONE]``, on error, and when the consumer abandons iteration
(``DeltaStream.close()``, even before the first item was pulled).
"""
from __future__ import annotations

import codecs
import json
import re
from typing import Any, Callable, Iterable, Iterator, List, Optional

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL, SSE_EVENT_SEPARATOR

_LINE_SPLIT = re.compile(r"\r?\n")


def extract_delta(payload: str) -> Optional[str]:
    """Return the text delta carried by one ``data:`` payload, if any.

    Never raises: malformed JSON and unexpected shapes yield ``None``.
    """
    try:
        parsed = json.loads(payload)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    choices = parsed.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    first = choices[0]
    delta: Any = None
    if isinstance(first.get("delta"), dict):
        delta = first["delta"].get("content")
    if delta is None and isinstance(first.get("message"), dict):
        delta = first["message"].get("content")
    return delta if isinstance(delta, str) else None


class SSEStreamParser:
    """Incremental SSE parser state for a single stream.

    ``feed`` accepts raw bytes and returns the deltas completed by them;
    ``flush`` processes whatever remains once the source is exhausted. After
    a ``[DONE]`` sentinel, :attr:`done` is ``True`` and further input is
    ignored.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""
        self.done = False

    def feed(self, chunk: bytes) -> List[str]:
        if self.done:
            return []
        if chunk:
            self._buffer = (self._buffer + self._decoder.decode(chunk)).replace("\r\n", "\n")
        out: List[str] = []
        while not self.done:
            idx = self._buffer.find(SSE_EVENT_SEPARATOR)
            if idx == -1:
                break
            block = self._buffer[:idx]
            self._buffer = self._buffer[idx + len(SSE_EVENT_SEPARATOR):]
            out.extend(self._parse_block(block))
        if self.done:
            self._buffer = ""
        return out

    def flush(self) -> List[str]:
        if self.done:
            return []
        self._buffer = (self._buffer + self._decoder.decode(b"", final=True)).replace("\r\n", "\n")
        block, self._buffer = self._buffer, ""
        out = self._parse_block(block)
        self.done = True
        return out

    def _parse_block(self, block: str) -> List[str]:
        out: List[str] = []
        packet = block.strip()
        if not packet:
            return out
        for line in _LINE_SPLIT.split(packet):
            line = line.strip()
            if not line.startswith(SSE_DATA_PREFIX):
                continue
            payload = line[len(SSE_DATA_PREFIX):].strip()
            if payload == SSE_DONE_SENTINEL:
                self.done = True
                break
            delta = extract_delta(payload)
            if delta:
                out.append(delta)
        return out


def _generate_deltas(reader: Iterable[bytes]) -> Iterator[str]:
    parser = SSEStreamParser()
    for chunk in reader:
        yield from parser.feed(chunk)
        if parser.done:
            return
    yield from parser.flush()


class DeltaStream:
    """Single-pass iterator of text deltas that owns its byte source.

    ``release`` runs exactly once: when the deltas are exhausted, when parsing
    or reading raises, or when :meth:`close` is called (even before the first
    item was pulled). Usable as a context manager.
    """

    def __init__(
        self,
        reader: Optional[Iterable[bytes]],
        release: Optional[Callable[[], None]] = None,
    ) -> None:
        self._deltas: Iterator[str] = _generate_deltas(reader) if reader is not None else iter(())
        self._release = release
        self.closed = False

    def __iter__(self) -> "DeltaStream":
        return self

    def __next__(self) -> str:
        if self.closed:
            raise StopIteration
        try:
            return next(self._deltas)
        except BaseException:
            self.close()
            raise

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            close = getattr(self._deltas, "close", None)
            if close is not None:
                close()
        finally:
            if self._release is not None:
                self._release()

    def __enter__(self) -> "DeltaStream":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def iter_sse_deltas(
    reader: Optional[Iterable[bytes]],
    release: Optional[Callable[[], None]] = None,
) -> DeltaStream:
    """Return the text deltas of an SSE byte stream.

    Parameters
    ----------
    reader:
        Pull-based byte source (e.g. ``httpx.Response.iter_bytes()``). When
        ``None`` the sequence is empty.
    release:
        Callback releasing the underlying stream (e.g. ``Response.close``).
        Invoked exactly once on every exit path.

    Returns
    -------
    DeltaStream
        Lazy iterator of non-empty text fragments in arrival order.
    """
    return DeltaStream(reader, release)


__all__ = ["DeltaStream", "SSEStreamParser", "extract_delta", "iter_sse_deltas"]

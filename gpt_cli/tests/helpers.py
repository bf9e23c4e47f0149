"""Shared builders for SSE and chat completion payloads used across tests."""
from __future__ import annotations

import json
from typing import Any, Dict


def delta(text: str) -> Dict[str, Any]:
    """Return one streaming frame carrying ``text`` as ``delta.content``."""
    return {"choices": [{"delta": {"content": text}}]}


def completion(content: Any) -> Dict[str, Any]:
    """Return a non-streaming response body with ``message.content``."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def sse_body(*payloads: Any, done: bool = True) -> bytes:
    """Encode payloads as ``data: <json>`` SSE frames followed by ``[DONE]``."""
    frames = [f"data: {json.dumps(p, ensure_ascii=False)}\n\n" for p in payloads]
    if done:
        frames.append("data: [DONE]\n\n")
    return "".join(frames).encode("utf-8")

"""Chat request executor for OpenAI-compatible ``/chat/completions`` endpoints.

Purpose
-------
Perform one HTTP POST chat-completion call and either return the full
completion text (non-streaming) or hand the response body to the SSE parser
(streaming).

External dependencies
---------------------
- ``httpx`` for the transport. The caller may inject any ``httpx.Client``
  (tests use ``httpx.MockTransport``); otherwise a pooled client is used.

Failure semantics
-----------------
- Transport exceptions and non-2xx responses are normalized into
  :class:`ProviderError`. Error bodies are parsed as JSON when possible; the
  parsed value (or a ``{status, statusText, body}`` stand-in) is kept as
  ``raw``.
- A 2xx response without a string ``choices[0].message.content`` raises a
  ``PROTOCOL`` error. Nothing is retried at this layer.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Optional

import httpx

from ..constants import INVALID_RESPONSE_SHAPE
from ..errors import ErrorCode, ProviderError, to_provider_error
from ..http import resolve_fetcher
from ..logging import LogContext, get_logger, log_event
from ..models import ChatRequest
from ..streaming import iter_sse_deltas

_logger = get_logger("executor")


def build_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Return the request headers for a bearer-authenticated JSON POST."""
    return {
        "Authorization": f"Bearer {api_key or ''}",
        "Content-Type": "application/json",
    }


def ensure_response_ok(
    response: httpx.Response,
    *,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> None:
    """Raise a normalized :class:`ProviderError` for non-2xx responses.

    The body is read as text and parsed as JSON when possible; either way
    the result goes through the error normalizer.
    """
    if response.is_success:
        return
    response.read()
    text = response.text
    payload: Any
    try:
        payload = json.loads(text)
    except ValueError:
        payload = {
            "status": response.status_code,
            "statusText": response.reason_phrase,
            "body": text,
        }
    raise to_provider_error(payload, provider=provider, model=model, status=response.status_code)


def extract_message_content(data: Any) -> Any:
    """Return ``choices[0].message.content`` from a decoded body, or ``None``."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    return message.get("content") if isinstance(message, dict) else None


def _transport_error(exc: Exception, provider: Optional[str], model: Optional[str]) -> ProviderError:
    return to_provider_error(exc, provider=provider, model=model)


def chat_completion_request(
    url: str,
    api_key: Optional[str],
    body: ChatRequest,
    fetcher: Optional[httpx.Client] = None,
    *,
    provider: Optional[str] = None,
) -> str:
    """Send a non-streaming chat completion and return the message content.

    Parameters
    ----------
    url:
        Fully constructed ``.../chat/completions`` endpoint.
    api_key:
        Bearer credential sent in the ``Authorization`` header.
    body:
        Request DTO; ``stream`` is forced to ``False`` on the wire.
    fetcher:
        Optional transport; defaults to a pooled ``httpx.Client``.
    provider:
        Provider key used for error and log context only.

    Returns
    -------
    str
        ``choices[0].message.content`` of the response.

    Raises
    ------
    ProviderError
        On transport failure, non-2xx status, or an invalid response shape.
    """
    payload = body.with_stream(False).to_dict()
    model = payload.get("model")
    log_event(_logger, "chat.request", LogContext(provider=provider, model=model, url=url, stream=False))
    client = resolve_fetcher(fetcher, "chat")
    try:
        response = client.post(url, headers=build_headers(api_key), json=payload)
    except httpx.HTTPError as exc:
        raise _transport_error(exc, provider, model) from exc
    ensure_response_ok(response, provider=provider, model=model)
    try:
        data = response.json()
    except ValueError as exc:
        raise ProviderError(
            message=INVALID_RESPONSE_SHAPE,
            provider=provider,
            model=model,
            kind=ErrorCode.PROTOCOL,
            status=response.status_code,
            raw=response.text,
        ) from exc
    content = extract_message_content(data)
    if not isinstance(content, str):
        raise ProviderError(
            message=INVALID_RESPONSE_SHAPE,
            provider=provider,
            model=model,
            kind=ErrorCode.PROTOCOL,
            status=response.status_code,
            raw=data,
        )
    return content


def chat_completion_stream(
    url: str,
    api_key: Optional[str],
    body: ChatRequest,
    fetcher: Optional[httpx.Client] = None,
    *,
    provider: Optional[str] = None,
) -> Iterator[str]:
    """Send a streaming chat completion and return the lazy delta sequence.

    Request construction and error handling match
    :func:`chat_completion_request` (with ``stream`` forced to ``True``). The
    request is sent eagerly, so HTTP failures raise here; on success the
    response body is handed to :func:`iter_sse_deltas`, which closes the
    response exactly once when iteration ends or is abandoned.
    """
    payload = body.with_stream(True).to_dict()
    model = payload.get("model")
    log_event(_logger, "chat.request", LogContext(provider=provider, model=model, url=url, stream=True))
    client = resolve_fetcher(fetcher, "stream")
    request = client.build_request("POST", url, headers=build_headers(api_key), json=payload)
    try:
        response = client.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise _transport_error(exc, provider, model) from exc
    try:
        ensure_response_ok(response, provider=provider, model=model)
    except BaseException:
        response.close()
        raise
    return iter_sse_deltas(response.iter_bytes(), release=response.close)


__all__ = [
    "build_headers",
    "ensure_response_ok",
    "extract_message_content",
    "chat_completion_request",
    "chat_completion_stream",
]

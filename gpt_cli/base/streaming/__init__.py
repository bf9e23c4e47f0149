"""Streaming primitives: SSE framing and delta extraction."""

from .sse import DeltaStream, SSEStreamParser, extract_delta, iter_sse_deltas

__all__ = ["DeltaStream", "SSEStreamParser", "extract_delta", "iter_sse_deltas"]

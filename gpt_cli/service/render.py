"""Terminal rendering of markdown completions (rich)."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown


def render_markdown(text: str, *, width: Optional[int] = None, color: Optional[bool] = None) -> str:
    """Render ``text`` as terminal markdown and return the captured output.

    ``color=None`` lets rich detect whether stdout is a terminal; when it is
    not, the result is plain text without escape sequences.
    """
    console = Console(width=width, force_terminal=color, no_color=color is False)
    with console.capture() as capture:
        console.print(Markdown(text))
    return capture.get().rstrip("\n")


__all__ = ["render_markdown"]

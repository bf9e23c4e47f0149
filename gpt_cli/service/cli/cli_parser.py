"""CLI parser construction for gpt-cli.

This module wires argument shapes only. Execution lives in ``cli_actions``
to keep the presentation layer thin and testable.
"""

from __future__ import annotations

import argparse

from ...base.factory import supported_providers


def add_bool_flag(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    """Attach ``--<name>``/``--no-<name>`` flags to a parser.

    Notes
    -----
    - Neither flag takes a value so trailing prompt words are never consumed.
    - The default is ``None`` ("not given") so lower-precedence sources and
      built-in defaults can fill it in.
    """
    dest = name.replace("-", "_")
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument(f"--{name}", dest=dest, action="store_const", const=True, default=None, help=help_text)
    grp.add_argument(f"--no-{name}", dest=dest, action="store_const", const=False, help=argparse.SUPPRESS)


def build_parser() -> argparse.ArgumentParser:
    """Construct the gpt-cli argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser whose free positional words form the prompt.
    """
    p = argparse.ArgumentParser(
        prog="gpt-cli",
        description="Send a prompt to an OpenAI-compatible chat API and print the reply.",
    )
    p.add_argument("prompt", nargs="*", help="Prompt words (stdin is read when piped)")
    p.add_argument(
        "--provider",
        default=None,
        help=f"Provider adapter ({', '.join(supported_providers())})",
    )
    p.add_argument("--model", default=None, help="Model identifier")
    p.add_argument("--temperature", type=float, default=None, help="Sampling temperature (0-2)")
    p.add_argument("--system", default=None, help="System prompt")
    p.add_argument("--file", default=None, help="Append the contents of a file to the prompt")
    p.add_argument("--verbose", action="store_true", default=None, help="Diagnostic logs on stderr")
    add_bool_flag(p, "markdown", "Render markdown output (--no-markdown for plain text)")
    add_bool_flag(p, "retry-model", "Retry once without a model when the model is rejected")
    add_bool_flag(p, "stream", "Stream the reply as it arrives (--no-stream to disable)")
    return p


__all__ = ["build_parser", "add_bool_flag"]

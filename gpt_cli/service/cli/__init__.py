"""gpt-cli command line entrypoint.

This package wires argument parsing to the action handler kept in
``cli_actions``. It performs no provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
- ``build_parser``: argument parser factory
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .cli_actions import EXIT_OK, collect_prompt, handle_run, is_verbose, report_error
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, *, stdin: Optional[TextIO] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    stdin: Optional[TextIO]
        Prompt source when no prompt words are given; defaults to ``sys.stdin``.

    Returns
    -------
    int
        Process exit code (0 success, 1 run failure). Usage errors exit with
        2 through ``argparse``.
    """
    p = build_parser()
    args = p.parse_intermixed_args(list(sys.argv[1:] if argv is None else argv))
    try:
        prompt = collect_prompt(args.prompt, args.file, stdin=sys.stdin if stdin is None else stdin)
    except OSError as exc:
        return report_error(exc, verbose=is_verbose(args))
    if not prompt:
        p.print_help()
        return EXIT_OK
    return handle_run(args, prompt)


__all__ = ["main", "build_parser"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""JSON formatting and per-call context for the ``gpt_cli`` loggers.

``base.logging`` installs :class:`JsonFormatter` on the shared handler and
merges :class:`LogContext` fields into every structured event.
"""

from .json_formatter import JsonFormatter
from .logging_context import LogContext

__all__ = ["JsonFormatter", "LogContext"]

"""Auxiliary logging helpers (formatters, context) used by biz_errors.logging."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext"]

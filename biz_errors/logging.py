"""Base structured logging utilities for biz_errors.

Rationale:
- Central place to configure consistent JSON (or plain) logging for the
  package, most importantly for the default error recorder.
- Avoid sprinkling ad-hoc logger setup across modules.
- Dependency-free: stdlib ``logging`` plus the helpers in ``log_support``.

All package loggers are children of the shared ``biz_errors`` logger, which
owns a single managed stderr handler and does not propagate to the root logger.
Applications that want the events in their own pipeline can call
``configure_logger`` (level, file handler) or attach handlers to
``logging.getLogger("biz_errors")`` directly.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional, Union

from .config import defaults
from .config.env import get_log_level, json_logging_enabled, parse_level
from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_biz_errors_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_biz_errors_console_handler"
_FILE_HANDLER_ATTR = "_biz_errors_file_handler"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter(defaults.PLAIN_LOG_FORMAT)


def _new_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    """Initialize and return the shared ``biz_errors`` logger."""

    logger = logging.getLogger(defaults.BASE_LOGGER_NAME)
    desired_level = get_log_level()
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # The stream went away (e.g. replaced by a test harness).
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_new_console_handler(json_mode, desired_level))
                continue
            existing.setLevel(desired_level)
            if isinstance(existing, logging.StreamHandler):
                with contextlib.suppress(Exception):
                    existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_new_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = defaults.BASE_LOGGER_NAME, json_mode: Optional[bool] = None) -> logging.Logger:
    """Return a package logger backed by the shared base handler.

    Parameters
    ----------
    name: str
        Logger name. Anything other than the base name should be a dotted child
        of it (``biz_errors.events``) so records reach the managed handler.
    json_mode: Optional[bool]
        Force JSON or plain output. ``None`` reads ``BIZ_ERRORS_LOG_JSON``.
    """
    if json_mode is None:
        json_mode = json_logging_enabled()
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == defaults.BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    # Drop previously managed console handlers to avoid duplicate emissions.
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: Union[int, str, None] = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``biz_errors`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (created if missing). When ``None``, any file handler
        previously attached by this function is removed.
    json_mode: bool
        Whether the managed file handler uses the JSON formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.

    Notes
    -----
    Handlers attached by callers are left alone; only handlers tagged by this
    module are replaced or removed.
    """
    logger = logging.getLogger(defaults.BASE_LOGGER_NAME)
    if not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger = get_logger(defaults.BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(parse_level(level, default=logger.level))
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    parent = os.path.dirname(abs_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()

    if existing is None:
        fh = RotatingFileHandler(
            abs_path,
            maxBytes=defaults.LOG_FILE_MAX_BYTES,
            backupCount=defaults.LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        setattr(fh, _FILE_HANDLER_ATTR, True)
        existing = fh
        logger.addHandler(fh)
    existing.setFormatter(_make_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    exc_info: Any = None,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (usually from ``get_logger``).
    event: str
        Event name (e.g. ``biz_error.wrap``).
    ctx: LogContext | None
        Request/trace context; merged shallowly.
    level: int
        Logging level for the record.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    exc_info:
        Forwarded to the logging call so handlers can render a traceback.
    **fields: Any
        Arbitrary key/value pairs. Values that are not JSON serializable are
        rendered with ``str``.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str), exc_info=exc_info)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]

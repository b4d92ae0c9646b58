"""biz_errors package

Structured business error classification.

Purpose:
    Define a hierarchy of named business error codes, attach any exception to
    a code (producing a chained ``BizError``), and later test whether an error
    traces back to a given code regardless of how deeply it is wrapped.

Public API (re-exported):
    - Version: ``__version__``
    - Codes and errors: :class:`BizCode`, :class:`BizError`
    - Tree initialisation: :func:`init_module`, :func:`code_field`,
      :func:`group_field`
    - Chain helpers: :func:`iter_chain`, :func:`find_node`, :func:`as_error`,
      :func:`is_error`, :func:`unwrap`
    - Recording: :class:`ErrorEvent`, :class:`ErrorRecorder`,
      :class:`LoggingRecorder`, :func:`get_recorder`, :func:`set_recorder`,
      :func:`reset_recorder`, :func:`use_recorder`
    - Logging: :class:`LogContext`, :func:`get_logger`, :func:`configure_logger`
    - Origins: :class:`Origin`, :func:`capture_location`
"""

from .chain import as_error, find_node, is_error, iter_chain, unwrap
from .errors import BizCode, BizError
from .location import Origin, capture_location
from .logging import LogContext, configure_logger, get_logger
from .module_init import code_field, group_field, init_module
from .recorder import (
    ErrorEvent,
    ErrorRecorder,
    LoggingRecorder,
    get_recorder,
    reset_recorder,
    set_recorder,
    use_recorder,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Codes and errors
    "BizCode",
    "BizError",
    # Tree initialisation
    "init_module",
    "code_field",
    "group_field",
    # Chain helpers
    "iter_chain",
    "find_node",
    "as_error",
    "is_error",
    "unwrap",
    # Recording
    "ErrorEvent",
    "ErrorRecorder",
    "LoggingRecorder",
    "get_recorder",
    "set_recorder",
    "reset_recorder",
    "use_recorder",
    # Logging
    "LogContext",
    "get_logger",
    "configure_logger",
    # Origins
    "Origin",
    "capture_location",
]

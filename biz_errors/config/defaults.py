"""biz_errors.config.defaults
=========================

Central place for small, stable default values used across the biz_errors
package. These defaults can be overridden via environment variables (see
``biz_errors.config.env``) but provide sensible fallbacks for applications and
tests.

This module intentionally avoids importing from other biz_errors modules to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Logging ----

# Shared base logger; every package logger is a child of this one.
BASE_LOGGER_NAME = "biz_errors"
# Logger used by the default error recorder.
RECORDER_LOGGER_NAME = "biz_errors.events"
# Event name written for every wrap.
WRAP_EVENT_NAME = "biz_error.wrap"
# Plain-text format used when JSON logging is disabled.
PLAIN_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_EVENT_LEVEL = "ERROR"
# Rotating file handler limits (10MB x 5 backups).
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


# ---- Origin capture ----

# Number of stack frames kept for the verbose error format.
DEFAULT_STACK_DEPTH = 32
DEFAULT_CAPTURE_STACK = True


# ---- Tree initializer ----

# Field metadata keys consumed by ``init_module``.
KEY_TAG = "key"
PREFIX_TAG = "prefix"

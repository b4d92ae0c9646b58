"""Business error code public surface.

This module re-exports the one-class-per-file implementations under
``biz_errors.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.biz_code import BizCode, new_correlation_id
from .errors_parts.biz_error import BizError

__all__ = ["BizCode", "BizError", "new_correlation_id"]

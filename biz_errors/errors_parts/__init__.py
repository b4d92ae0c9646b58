"""Errors parts package public surface.

Re-exports individual components for optional direct imports.
Prefer importing from ``biz_errors.errors`` for the stable surface.
"""

from .biz_code import BizCode, new_correlation_id
from .biz_error import BizError

__all__ = ["BizCode", "BizError", "new_correlation_id"]

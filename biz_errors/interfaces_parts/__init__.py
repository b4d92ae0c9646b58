"""Interfaces parts package public surface.

Re-exports the single-class Protocol modules. Prefer importing from
``biz_errors.interfaces`` for the stable surface.
"""

from .error_recorder import ErrorRecorder
from .supports_match import SupportsMatch
from .supports_unwrap import SupportsUnwrap

__all__ = ["ErrorRecorder", "SupportsMatch", "SupportsUnwrap"]

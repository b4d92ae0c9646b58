"""
Structural interfaces (Protocols) for the biz_errors package.

This module re-exports Protocols split into single-class modules under
``biz_errors.interfaces_parts`` while keeping imports stable for callers.
"""

from __future__ import annotations

from .interfaces_parts import ErrorRecorder, SupportsMatch, SupportsUnwrap

__all__ = [
    "ErrorRecorder",
    "SupportsMatch",
    "SupportsUnwrap",
]

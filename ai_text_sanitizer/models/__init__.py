"""Shared typed data models for the sanitizer.

This package contains the immutable records passed between the sanitizer,
the CLI, and rendering helpers.
"""

from .datatypes import SanitizeChanges, SanitizeOptions, SanitizeResult

__all__ = [
    "SanitizeChanges",
    "SanitizeOptions",
    "SanitizeResult",
]

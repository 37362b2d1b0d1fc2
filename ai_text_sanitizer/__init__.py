"""Top-level package for the AI text sanitizer.

This package normalizes text produced by LLM tools: it strips invisible and
control characters, folds exotic spaces, converts smart punctuation to ASCII,
removes inline citation placeholders, and reports a tally of every change.
The main entry point is `sanitize_ai_text`.
"""

__version__ = "0.3.0"

from .errors import InvalidArgumentError
from .models.datatypes import SanitizeChanges, SanitizeOptions, SanitizeResult
from .text.sanitizer import TextSanitizer, sanitize_ai_text

__all__ = [
    "InvalidArgumentError",
    "SanitizeChanges",
    "SanitizeOptions",
    "SanitizeResult",
    "TextSanitizer",
    "sanitize_ai_text",
    "__version__",
]

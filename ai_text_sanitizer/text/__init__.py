"""Text sanitizing components.

This package provides the character tables, composable rules, and the
sanitizer that runs them in order over LLM-produced text.
"""

from .patterns import capabilities
from .rules import (
    CollapseSpaces,
    CompatibilityFold,
    FoldExoticSpaces,
    NormalizeLineEndings,
    PrettifyPunctuation,
    RemoveAsciiControls,
    RemoveCitationPlaceholders,
    RemoveEmojiGlue,
    RemoveInvisibleCharacters,
)
from .sanitizer import TextSanitizer, sanitize_ai_text

__all__ = [
    "TextSanitizer",
    "sanitize_ai_text",
    "capabilities",
    "NormalizeLineEndings",
    "RemoveCitationPlaceholders",
    "CompatibilityFold",
    "RemoveInvisibleCharacters",
    "RemoveEmojiGlue",
    "RemoveAsciiControls",
    "FoldExoticSpaces",
    "PrettifyPunctuation",
    "CollapseSpaces",
]

"""Deterministic sanitizer rules, one per pipeline stage.

Responsibilities:
- Provide composable rules that transform text and report how many matches
  they removed or replaced.
- Name the change-tally counter each rule feeds.

Rules hold no per-call state; a single instance may be shared across threads.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import ClassVar, Protocol
import unicodedata

from .patterns import (
    ASCII_CONTROL_RE,
    CITATION_RE,
    EMOJI_GLUE_RE,
    EXTRA_SPACE_RE,
    INVISIBLE_RE,
    LINE_ENDING_RE,
    NFKC_AVAILABLE,
    PUNCTUATION_TABLE,
    Replacement,
    SPACE_LIKE_RE,
    TRIM_CHARS,
)

REMOVED_INVISIBLE = "removed_invisible"
REMOVED_CTRL = "removed_ctrl"
REMOVED_CITATIONS = "removed_citations"
PRETTIFIED = "prettified"
COLLAPSED_SPACES = "collapsed_spaces"


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Text produced by one rule plus the number of matches it changed."""

    text: str
    count: int


class SanitizerRule(Protocol):
    """Protocol for sanitizer pipeline rules."""

    counter: str

    def apply(self, text: str) -> RuleOutcome:
        """Apply a single sanitizing transformation."""


class _SubstitutionRule:
    """Replace every match of a fixed pattern with a fixed string."""

    pattern: ClassVar[re.Pattern[str]]
    replacement: ClassVar[str] = ""
    counter: ClassVar[str]

    def apply(self, text: str) -> RuleOutcome:
        """Substitute all matches and report how many were replaced."""

        cleaned, count = self.pattern.subn(self.replacement, text)
        return RuleOutcome(cleaned, count)


class NormalizeLineEndings(_SubstitutionRule):
    """Rewrite CR and CRLF line endings to LF."""

    pattern = LINE_ENDING_RE
    replacement = "\n"
    counter = PRETTIFIED


class RemoveCitationPlaceholders(_SubstitutionRule):
    """Remove `(oaicite:N){index=N}` markers and the spaces before them."""

    pattern = CITATION_RE
    counter = REMOVED_CITATIONS


class CompatibilityFold:
    """Apply NFKC normalization, counting code points it folds.

    A count unit is one code point of the input whose standalone NFKC form
    differs from itself, not one combining sequence.
    """

    counter = PRETTIFIED

    def apply(self, text: str) -> RuleOutcome:
        """Fold compatibility variants when the runtime supports NFKC."""

        if not NFKC_AVAILABLE:
            return RuleOutcome(text, 0)
        count = sum(
            1 for character in text if unicodedata.normalize("NFKC", character) != character
        )
        return RuleOutcome(unicodedata.normalize("NFKC", text), count)


class RemoveInvisibleCharacters(_SubstitutionRule):
    """Remove zero-width, bidi, and other invisible format characters."""

    pattern = INVISIBLE_RE
    counter = REMOVED_INVISIBLE


class RemoveEmojiGlue(_SubstitutionRule):
    """Remove zero-width joiners and variation selectors."""

    pattern = EMOJI_GLUE_RE
    counter = REMOVED_INVISIBLE


class RemoveAsciiControls(_SubstitutionRule):
    """Remove C0 control characters and DEL, keeping TAB, LF, and CR."""

    pattern = ASCII_CONTROL_RE
    counter = REMOVED_CTRL


class FoldExoticSpaces(_SubstitutionRule):
    """Replace non-breaking and typographic spaces with an ASCII space."""

    pattern = SPACE_LIKE_RE
    replacement = " "
    counter = PRETTIFIED


class PrettifyPunctuation:
    """Convert curly quotes, dashes, ellipses, and bullets to ASCII."""

    counter = PRETTIFIED

    def __init__(self, table: tuple[Replacement, ...] = PUNCTUATION_TABLE) -> None:
        """Initialize with an ordered replacement table."""

        self.table = table

    def apply(self, text: str) -> RuleOutcome:
        """Apply each table entry in order, summing matches across entries."""

        total = 0
        for entry in self.table:
            text, count = entry.pattern.subn(entry.replacement, text)
            total += count
        return RuleOutcome(text, total)


class CollapseSpaces:
    """Collapse runs of ASCII spaces to one and trim the result."""

    counter = COLLAPSED_SPACES

    def apply(self, text: str) -> RuleOutcome:
        """Collapse repeated spaces, then trim surrounding whitespace.

        NEL (U+0085) is not whitespace here and survives at either end.
        """

        collapsed, count = EXTRA_SPACE_RE.subn(" ", text)
        return RuleOutcome(collapsed.strip(TRIM_CHARS), count)

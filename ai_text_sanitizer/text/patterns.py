"""Character tables and runtime feature flags used by sanitizer rules.

Responsibilities:
- Define every code-point class the sanitizer matches as a compiled pattern.
- Detect normalization and pattern-syntax support once at import time.

All values here are immutable and safe to share between concurrent callers.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
import unicodedata

BOM = "\uFEFF"


def _detect_unicode_property_escapes() -> bool:
    """Return whether the `re` engine accepts `\\p{..}` property escapes."""

    try:
        re.compile(r"\p{C}")
    except re.error:
        return False
    return True


NFKC_AVAILABLE = callable(getattr(unicodedata, "normalize", None))
UNICODE_PROPERTY_ESCAPES = _detect_unicode_property_escapes()

# CRLF or lone CR.
LINE_ENDING_RE = re.compile(r"\r\n?")

# Leading spaces are part of the match so removal leaves no gap.
CITATION_RE = re.compile(r" *\(oaicite:[0-9]+\)\{index=[0-9]+\}")

# ZWJ (U+200D) is absent here, see EMOJI_GLUE_RE.
INVISIBLE_RE = re.compile(
    "[\u00AD\u180E\u200B\u200C\u200E\u200F\u202A-\u202E"
    "\u2060-\u2064\u2066-\u2069\uFEFF]"
)

EMOJI_GLUE_RE = re.compile("[\u200D\uFE00-\uFE0F]")

# C0 controls and DEL, except TAB, LF and CR.
ASCII_CONTROL_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

SPACE_LIKE_RE = re.compile("[\u00A0\u1680\u2000-\u200A\u202F\u205F\u3000]")

EXTRA_SPACE_RE = re.compile(" {2,}")

# Whitespace removed from both ends when trimming. Unlike `str.strip()`,
# NEL (U+0085) and the C0 separators U+001C..U+001F are not included.
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \u00A0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202F\u205F\u3000\uFEFF"
)


@dataclass(frozen=True, slots=True)
class Replacement:
    """One entry of a fixed substitution table."""

    pattern: re.Pattern[str]
    replacement: str


PUNCTUATION_TABLE: tuple[Replacement, ...] = (
    Replacement(re.compile("[\u2018\u2019\u201A]"), "'"),
    Replacement(re.compile("[\u201C\u201D\u201E]"), '"'),
    Replacement(re.compile("[\u2013\u2014]"), "-"),
    Replacement(re.compile("\u2026"), "..."),
    Replacement(re.compile("[\u2022\u25AA\u25AB\u25B8\u25B9\u25CF]"), "-"),
)


def capabilities() -> dict[str, bool]:
    """Return the runtime feature flags detected at import time."""

    return {
        "nfkc_normalization": NFKC_AVAILABLE,
        "unicode_property_escapes": UNICODE_PROPERTY_ESCAPES,
    }

"""Sanitizer stage for LLM-produced text.

Responsibilities:
- Run the ordered rule pipeline over one text value.
- Preserve a leading byte-order mark verbatim while removing stray ones.
- Accumulate the per-category change tally returned with the cleaned text.
"""

from __future__ import annotations

from functools import lru_cache

from ..errors import InvalidArgumentError
from ..models.datatypes import SanitizeChanges, SanitizeOptions, SanitizeResult
from .patterns import BOM
from .rules import (
    COLLAPSED_SPACES,
    PRETTIFIED,
    REMOVED_CITATIONS,
    REMOVED_CTRL,
    REMOVED_INVISIBLE,
    CollapseSpaces,
    CompatibilityFold,
    FoldExoticSpaces,
    NormalizeLineEndings,
    PrettifyPunctuation,
    RemoveAsciiControls,
    RemoveCitationPlaceholders,
    RemoveEmojiGlue,
    RemoveInvisibleCharacters,
    SanitizerRule,
)

_COUNTERS = (
    REMOVED_INVISIBLE,
    REMOVED_CTRL,
    REMOVED_CITATIONS,
    PRETTIFIED,
    COLLAPSED_SPACES,
)


@lru_cache(maxsize=None)
def build_rules(options: SanitizeOptions) -> tuple[SanitizerRule, ...]:
    """Return the ordered rule sequence for the given options.

    Order matters: citations are matched on LF-normalized text, invisible
    characters are removed after NFKC so folded output is covered, and
    spaces collapse only once every other stage has produced its spaces.
    """

    rules: list[SanitizerRule] = [
        NormalizeLineEndings(),
        RemoveCitationPlaceholders(),
        CompatibilityFold(),
        RemoveInvisibleCharacters(),
    ]
    if not options.keep_emoji:
        rules.append(RemoveEmojiGlue())
    rules.extend(
        [
            RemoveAsciiControls(),
            FoldExoticSpaces(),
            PrettifyPunctuation(),
        ]
    )
    if options.collapse_spaces:
        rules.append(CollapseSpaces())
    return tuple(rules)


class TextSanitizer:
    """Apply the sanitizer rule sequence and tally every change."""

    def __init__(
        self,
        options: SanitizeOptions | None = None,
        rules: tuple[SanitizerRule, ...] | None = None,
    ) -> None:
        """Initialize with options and an optional custom rule sequence."""

        self.options = options or SanitizeOptions()
        self.rules = rules if rules is not None else build_rules(self.options)

    def sanitize(self, text: str) -> SanitizeResult:
        """Return cleaned text and the change tally for one input.

        Raises:
            InvalidArgumentError: If `text` is not a string.
        """

        if not isinstance(text, str):
            raise InvalidArgumentError("text must be a string")
        if not text:
            return SanitizeResult(cleaned="", changes=SanitizeChanges.zero())

        has_bom = text[0] == BOM
        if has_bom:
            text = text[1:]

        counts = dict.fromkeys(_COUNTERS, 0)
        for rule in self.rules:
            outcome = rule.apply(text)
            text = outcome.text
            counts[rule.counter] += outcome.count

        if has_bom:
            text = BOM + text
        return SanitizeResult(cleaned=text, changes=SanitizeChanges(**counts))


def sanitize_ai_text(text: str, options: SanitizeOptions | None = None) -> SanitizeResult:
    """Sanitize LLM-produced text with the default rule pipeline."""

    return TextSanitizer(options).sanitize(text)

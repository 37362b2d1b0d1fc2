"""Core datatypes shared across sanitizer modules.

Responsibilities:
- Represent the options, change tally, and result records of one sanitize call.
- Keep every record immutable so results can be shared freely between callers.

Key types:
- `SanitizeOptions`, `SanitizeChanges`, and `SanitizeResult`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SanitizeOptions:
    """Toggles recognized by the sanitizer.

    Attributes:
        keep_emoji: Preserve zero-width joiners and variation selectors that
            fuse multi-code-point emoji sequences.
        collapse_spaces: Collapse runs of ASCII spaces and trim the result.
    """

    keep_emoji: bool = True
    collapse_spaces: bool = True


@dataclass(frozen=True, slots=True)
class SanitizeChanges:
    """Per-category tally of matches removed or replaced in one call.

    Attributes:
        removed_invisible: Invisible/format characters removed.
        removed_ctrl: ASCII control characters removed.
        removed_citations: Citation placeholders removed.
        prettified: Line endings, compatibility folds, exotic spaces, and
            punctuation replacements.
        collapsed_spaces: Runs of repeated ASCII spaces collapsed.
    """

    removed_invisible: int = 0
    removed_ctrl: int = 0
    removed_citations: int = 0
    prettified: int = 0
    collapsed_spaces: int = 0

    @classmethod
    def zero(cls) -> SanitizeChanges:
        """Return a tally with every counter at zero."""

        return cls()

    @property
    def total(self) -> int:
        """Sum of all five named counters."""

        return (
            self.removed_invisible
            + self.removed_ctrl
            + self.removed_citations
            + self.prettified
            + self.collapsed_spaces
        )

    def as_dict(self) -> dict[str, int]:
        """Return counters in stable rendering order, `total` last."""

        return {
            "removed_invisible": self.removed_invisible,
            "removed_ctrl": self.removed_ctrl,
            "removed_citations": self.removed_citations,
            "prettified": self.prettified,
            "collapsed_spaces": self.collapsed_spaces,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class SanitizeResult:
    """Cleaned text paired with the tally of changes applied to it.

    Attributes:
        cleaned: Sanitized text.
        changes: Change tally for this call.
    """

    cleaned: str
    changes: SanitizeChanges

    @property
    def changed(self) -> bool:
        """Return whether any change was applied."""

        return self.changes.total > 0

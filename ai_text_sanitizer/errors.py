"""Domain exceptions for sanitizer calls and CLI diagnostics."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """Raised when the sanitizer receives a non-string text argument."""


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

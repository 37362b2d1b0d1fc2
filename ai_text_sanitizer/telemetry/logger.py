"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level logs for CLI commands via `loguru`.
- Keep text payloads out of log lines; only counters and identifiers are logged.
"""

from __future__ import annotations

import re
import sys
from typing import Mapping, TextIO

from loguru import logger as _loguru_logger

# Anything outside word characters and `-.:/` would break `key=value` parsing.
_UNSAFE_TOKEN_RE = re.compile(r"[^\w.:/-]")


def _context_token(value: object) -> str:
    """Render one context value as a single whitespace-free token."""

    return _UNSAFE_TOKEN_RE.sub("_", str(value).strip()) or "none"


def _render_fields(event: str, stage: str, level: str, context: Mapping[str, object]) -> str:
    """Build the `[phase]` line with fixed fields first, then sorted context."""

    fields = [f"level={level}", f"stage={stage}", f"event={event}"]
    fields.extend(f"{key}={_context_token(value)}" for key, value in sorted(context.items()))
    return "[phase] " + " ".join(fields)


class RunLogger:
    """Write `[phase]` lines for each CLI stage to a loguru sink.

    Example line::

        [phase] level=INFO stage=sanitize event=complete prettified=3 total=3
    """

    def __init__(self, sink: TextIO | None = None) -> None:
        """Route loguru to `sink`, defaulting to stderr so stdout stays data-only."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, context: Mapping[str, object]) -> None:
        _loguru_logger.log(level, _render_fields(event, stage, level, context))

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Log that `stage` began."""

        self._emit("INFO", "start", stage, context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Log that `stage` finished, attaching its summary counters."""

        self._emit("INFO", "complete", stage, context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Log a failed stage by exception type only; messages may echo input text."""

        self._emit("ERROR", "failure", stage, {"error_type": error_type})

"""Text input/output helpers for CLI commands.

Responsibilities:
- Read sanitizer input from a file or stdin without newline translation.
- Write sanitized output to a file or stdout, creating parent directories.

Inputs are decoded from raw bytes so CR and CRLF line endings reach the
sanitizer untouched. Outputs are encoded with the same codec whether they
go to a file or to stdout.
"""

from __future__ import annotations

from pathlib import Path
import sys

import typer

from ..errors import CommandStageError

STDIO_PATH = Path("-")


def is_stdio(path: Path | None) -> bool:
    """Return whether `path` denotes stdin/stdout."""

    return path is None or path == STDIO_PATH


def read_text(path: Path | None, encoding: str) -> str:
    """Read text from `path`, or stdin when `path` is `None` or `-`."""

    try:
        if is_stdio(path):
            raw = sys.stdin.buffer.read()
        else:
            raw = path.read_bytes()
        return raw.decode(encoding)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input file not found: `{path}`.",
            hint="Pass an existing file path, or `-` to read stdin.",
        ) from exc
    except UnicodeError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input `{_label(path)}` is not valid `{encoding}` text: {exc}",
            hint="Set the matching codec via `encoding` in the config file.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Failed to read input `{_label(path)}`: {exc}",
        ) from exc


def write_text(path: Path | None, text: str, encoding: str) -> Path | None:
    """Encode `text` with `encoding` and write it to `path`, or stdout.

    Stdout receives the encoded bytes too, so the configured codec applies
    to both destinations regardless of the terminal's locale.

    Returns:
        The written file path, or `None` when output went to stdout.
    """

    try:
        payload = text.encode(encoding)
    except UnicodeError as exc:
        raise CommandStageError(
            stage="write",
            detail=f"Output cannot be encoded as `{encoding}`: {exc}",
            hint="Use a Unicode codec such as `utf-8`.",
        ) from exc

    if is_stdio(path):
        typer.echo(payload, nl=False)
        return None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise CommandStageError(
            stage="write",
            detail=f"Failed to write output `{path}`: {exc}",
            hint="Verify the output directory is writable.",
        ) from exc
    return path


def _label(path: Path | None) -> str:
    """Return a display label for a path or stdin."""

    return "<stdin>" if is_stdio(path) else str(path)

"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command
diagnostics, change breakdowns, and machine-readable results.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import SanitizeChanges, SanitizeResult

_COUNTER_LABELS = {
    "removed_invisible": "Removed invisible",
    "removed_ctrl": "Removed control",
    "removed_citations": "Removed citations",
    "prettified": "Prettified",
    "collapsed_spaces": "Collapsed spaces",
    "total": "Total changes",
}


def describe_command_failure(command_name: str, exc: Exception) -> tuple[str, str | None]:
    """Return the headline and optional hint shown for a failed command.

    Stage errors name the stage that failed; anything else falls back to the
    exception text.
    """

    if not isinstance(exc, CommandStageError):
        return f"{command_name} failed: {exc}", None
    return f"{command_name} failed at stage `{exc.stage}`: {exc.detail}", exc.hint


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Report `exc` on stderr and end the command with exit code 1."""

    headline, hint = describe_command_failure(command_name, exc)
    typer.secho(headline, fg=typer.colors.RED, err=True)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_change_summary(changes: SanitizeChanges) -> None:
    """Print one aligned `label: count` row per counter to stderr."""

    width = max(len(label) for label in _COUNTER_LABELS.values())
    for key, count in changes.as_dict().items():
        typer.echo(f"{_COUNTER_LABELS[key]:<{width}} : {count}", err=True)


def echo_check_row(path: Path, changes: SanitizeChanges) -> None:
    """Print the check verdict for one input file."""

    if changes.total:
        typer.echo(f"{path}: {changes.total} change(s)")
    else:
        typer.echo(f"{path}: clean")


def render_result_json(result: SanitizeResult) -> str:
    """Serialize cleaned text and its tally as a JSON document."""

    payload = {"cleaned": result.cleaned, "changes": result.changes.as_dict()}
    return json.dumps(payload, ensure_ascii=False, indent=2)

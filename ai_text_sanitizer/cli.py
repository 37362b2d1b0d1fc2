"""Command-line interface for the AI text sanitizer.

Responsibilities:
- Expose user-facing commands for sanitizing and checking text files.
- Convert CLI arguments into `SanitizerConfig` and run the sanitizer.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .cli_rendering import (
    echo_change_summary,
    echo_check_row,
    exit_with_command_error,
    render_result_json,
)
from .cli_runtime import CommandStageRunner, resolve_command_config
from .io.text_files import read_text, write_text
from .telemetry.logger import RunLogger
from .text.sanitizer import TextSanitizer

app = typer.Typer(
    name="ai-text-sanitizer",
    no_args_is_help=True,
    help="Normalize text produced by LLM tools.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with sanitizer defaults."),
]
KeepEmojiOption = Annotated[
    bool | None,
    typer.Option(
        "--keep-emoji/--strip-emoji",
        help="Keep or strip zero-width joiners and variation selectors used by emoji.",
    ),
]
CollapseSpacesOption = Annotated[
    bool | None,
    typer.Option(
        "--collapse-spaces/--no-collapse-spaces",
        help="Collapse repeated spaces and trim leading/trailing whitespace.",
    ),
]


def _version_callback(value: bool) -> None:
    """Print the package version and exit when `--version` is passed."""

    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Normalize text produced by LLM tools."""


@app.command("clean")
def clean_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Text file to sanitize. Omit or pass `-` to read stdin."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write cleaned text here instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    keep_emoji: KeepEmojiOption = None,
    collapse_spaces: CollapseSpacesOption = None,
    show_changes: Annotated[
        bool,
        typer.Option("--changes/--no-changes", help="Print a change breakdown to stderr."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print cleaned text and changes as one JSON document."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit phase logs to stderr."),
    ] = False,
) -> None:
    """Sanitize one text file or stdin."""

    runner = CommandStageRunner(RunLogger() if verbose else None)
    try:
        config = runner.run_stage(
            "config",
            lambda: resolve_command_config(config_file, keep_emoji, collapse_spaces),
        )
        text = runner.run_stage(
            "read",
            lambda: read_text(input_path, config.encoding),
            summarize=lambda value: {"chars": len(value)},
        )
        sanitizer = TextSanitizer(config.to_options())
        result = runner.run_stage(
            "sanitize",
            lambda: sanitizer.sanitize(text),
            summarize=lambda value: value.changes.as_dict(),
        )
        payload = render_result_json(result) + "\n" if as_json else result.cleaned
        runner.run_stage("write", lambda: write_text(out, payload, config.encoding))
    except Exception as exc:
        exit_with_command_error("clean", exc)

    if show_changes:
        echo_change_summary(result.changes)


@app.command("check")
def check_command(
    input_paths: Annotated[
        list[Path],
        typer.Argument(help="Text files to check."),
    ],
    config_file: ConfigOption = None,
    keep_emoji: KeepEmojiOption = None,
    collapse_spaces: CollapseSpacesOption = None,
) -> None:
    """Report files that sanitizing would change; exit 1 if any would."""

    try:
        config = resolve_command_config(config_file, keep_emoji, collapse_spaces)
        sanitizer = TextSanitizer(config.to_options())
        results = [
            (path, sanitizer.sanitize(read_text(path, config.encoding)))
            for path in input_paths
        ]
    except Exception as exc:
        exit_with_command_error("check", exc)

    for path, result in results:
        echo_check_row(path, result.changes)
    if any(result.changed for _, result in results):
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()

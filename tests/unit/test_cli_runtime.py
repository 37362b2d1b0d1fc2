"""Unit tests for CLI config resolution and stage telemetry helpers."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from ai_text_sanitizer.cli_runtime import (
    CommandStageRunner,
    load_base_config,
    resolve_command_config,
)
from ai_text_sanitizer.config import SanitizerConfig
from ai_text_sanitizer.errors import CommandStageError
from ai_text_sanitizer.telemetry.logger import RunLogger


def test_resolve_command_config_prefers_cli_flags_over_yaml(tmp_path: Path) -> None:
    """Explicit CLI flags should win over YAML values."""

    config_path = tmp_path / "sanitizer.yml"
    config_path.write_text("keep_emoji: false\ncollapse_spaces: false\n", encoding="utf-8")

    config = resolve_command_config(config_path, keep_emoji=True, collapse_spaces=None)

    assert config == SanitizerConfig(keep_emoji=True, collapse_spaces=False)


def test_resolve_command_config_reads_environment_without_config_file() -> None:
    """Without `--config`, environment values should be used."""

    config = resolve_command_config(
        None,
        keep_emoji=None,
        collapse_spaces=None,
        env={"AI_TEXT_SANITIZER_COLLAPSE_SPACES": "0"},
    )

    assert config == SanitizerConfig(collapse_spaces=False)


def test_load_base_config_maps_missing_file_to_config_stage(tmp_path: Path) -> None:
    """A missing config file should become a config-stage error with a hint."""

    missing = tmp_path / "missing.yml"

    with pytest.raises(CommandStageError) as exc_info:
        load_base_config(missing)

    assert exc_info.value.stage == "config"
    assert exc_info.value.detail == f"Config file not found: `{missing}`."
    assert exc_info.value.hint is not None


def test_load_base_config_maps_yaml_syntax_errors(tmp_path: Path) -> None:
    """Unparseable YAML should become a config-stage error."""

    config_path = tmp_path / "broken.yml"
    config_path.write_text("keep_emoji: [unclosed\n", encoding="utf-8")

    with pytest.raises(CommandStageError) as exc_info:
        load_base_config(config_path)

    assert exc_info.value.stage == "config"
    assert "Failed to load config file" in exc_info.value.detail


def test_load_base_config_maps_invalid_environment() -> None:
    """Invalid environment values should become a config-stage error."""

    with pytest.raises(CommandStageError, match="Invalid environment configuration"):
        load_base_config(None, env={"AI_TEXT_SANITIZER_ENCODING": "no-such-codec"})


def test_stage_runner_logs_start_and_complete_with_summary() -> None:
    """Successful stages should log start and a complete event carrying the summary."""

    sink = io.StringIO()
    runner = CommandStageRunner(RunLogger(sink=sink))

    value = runner.run_stage("sanitize", lambda: 5, summarize=lambda result: {"total": result})

    assert value == 5
    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=sanitize event=start",
        "[phase] level=INFO stage=sanitize event=complete total=5",
    ]


def test_stage_runner_logs_failure_and_reraises() -> None:
    """Failing stages should log the error type and propagate the exception."""

    sink = io.StringIO()
    runner = CommandStageRunner(RunLogger(sink=sink))

    def _fail() -> None:
        raise OSError("disk gone")

    with pytest.raises(OSError, match="disk gone"):
        runner.run_stage("write", _fail)

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=write event=start",
        "[phase] level=ERROR stage=write event=failure error_type=OSError",
    ]


def test_stage_runner_without_logger_only_runs_action() -> None:
    """A runner without a logger should return the action result silently."""

    assert CommandStageRunner().run_stage("read", lambda: "text") == "text"

"""Runtime helpers shared by CLI commands.

Responsibilities:
- Resolve effective command configuration from config files, environment,
  and explicit CLI overrides.
- Run named command stages with start/complete/failure telemetry.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TypeVar

from .config import ConfigLoader, SanitizerConfig
from .errors import CommandStageError
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


def load_base_config(
    config_path: Path | None,
    env: Mapping[str, str] | None = None,
) -> SanitizerConfig:
    """Load the YAML config when given, otherwise read the environment.

    Failures are mapped to `CommandStageError` at stage `config`.
    """

    if config_path is None:
        try:
            return ConfigLoader.from_env(env)
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `AI_TEXT_SANITIZER_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except Exception as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def resolve_command_config(
    config_path: Path | None,
    keep_emoji: bool | None,
    collapse_spaces: bool | None,
    env: Mapping[str, str] | None = None,
) -> SanitizerConfig:
    """Return the effective config; explicit CLI flags win over loaded values."""

    base_config = load_base_config(config_path, env)
    return base_config.with_overrides(
        keep_emoji=keep_emoji,
        collapse_spaces=collapse_spaces,
    )


class CommandStageRunner:
    """Run named command stages and emit telemetry through an optional logger."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize with a logger, or `None` to run silently."""

        self._run_logger = run_logger

    def run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        summarize: Callable[[_StageResult], Mapping[str, object]] | None = None,
    ) -> _StageResult:
        """Run one stage, logging start, then complete or failure.

        `summarize` maps the stage result to context attached to the
        complete event.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = dict(summarize(result)) if summarize is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result

"""Configuration model and loaders for the sanitizer CLI.

Responsibilities:
- Define CLI runtime configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.
- Apply explicit command-line overrides with deterministic precedence.

Key types:
- `SanitizerConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `SanitizerConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import SanitizeOptions

_DEFAULT_ENCODING = "utf-8"

# Spellings accepted for the toggles in YAML and the environment.
_BOOLEAN_SPELLINGS: Mapping[str, bool] = {
    "true": True,
    "yes": True,
    "on": True,
    "1": True,
    "false": False,
    "no": False,
    "off": False,
    "0": False,
}

ENV_KEEP_EMOJI = "AI_TEXT_SANITIZER_KEEP_EMOJI"
ENV_COLLAPSE_SPACES = "AI_TEXT_SANITIZER_COLLAPSE_SPACES"
ENV_ENCODING = "AI_TEXT_SANITIZER_ENCODING"


@dataclass(frozen=True, slots=True)
class SanitizerConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        keep_emoji: Preserve zero-width joiners and variation selectors.
        collapse_spaces: Collapse repeated spaces and trim the output.
        encoding: Text codec used to read inputs and write outputs.
    """

    keep_emoji: bool = True
    collapse_spaces: bool = True
    encoding: str = _DEFAULT_ENCODING

    def validate(self) -> None:
        """Validate configuration values before any file is touched."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc

    def to_options(self) -> SanitizeOptions:
        """Return the sanitizer options carried by this config."""

        return SanitizeOptions(
            keep_emoji=self.keep_emoji,
            collapse_spaces=self.collapse_spaces,
        )

    def with_overrides(
        self,
        keep_emoji: bool | None = None,
        collapse_spaces: bool | None = None,
        encoding: str | None = None,
    ) -> SanitizerConfig:
        """Return a copy where every non-`None` override replaces the loaded value."""

        config = SanitizerConfig(
            keep_emoji=self.keep_emoji if keep_emoji is None else keep_emoji,
            collapse_spaces=(
                self.collapse_spaces if collapse_spaces is None else collapse_spaces
            ),
            encoding=self.encoding if encoding is None else encoding,
        )
        config.validate()
        return config


class ConfigLoader:
    """Factory methods for creating `SanitizerConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"keep_emoji", "collapse_spaces", "encoding"})

    @staticmethod
    def from_yaml(path: Path) -> SanitizerConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        source_label = f"YAML `{path}`"
        ConfigLoader._validate_yaml_keys(payload, source_label)
        config = SanitizerConfig(
            keep_emoji=ConfigLoader._optional_boolean(
                payload.get("keep_emoji"), f"{source_label} field `keep_emoji`", True
            ),
            collapse_spaces=ConfigLoader._optional_boolean(
                payload.get("collapse_spaces"),
                f"{source_label} field `collapse_spaces`",
                True,
            ),
            encoding=ConfigLoader._optional_codec(payload.get("encoding")),
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SanitizerConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        config = SanitizerConfig(
            keep_emoji=ConfigLoader._optional_boolean(
                env_map.get(ENV_KEEP_EMOJI),
                f"Environment variable `{ENV_KEEP_EMOJI}`",
                True,
            ),
            collapse_spaces=ConfigLoader._optional_boolean(
                env_map.get(ENV_COLLAPSE_SPACES),
                f"Environment variable `{ENV_COLLAPSE_SPACES}`",
                True,
            ),
            encoding=ConfigLoader._optional_codec(env_map.get(ENV_ENCODING)),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the sanitizer does not understand."""

        unknown = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_boolean(raw_value: object, label: str, default: bool) -> bool:
        """Resolve a sanitizer toggle from a YAML scalar or environment string.

        YAML already yields real booleans for `true`/`false`; strings and
        integers are matched case-insensitively against the accepted
        spellings. A missing or blank value selects `default`.

        Raises:
            ValueError: If the value is none of the accepted spellings.
        """

        if isinstance(raw_value, bool):
            return raw_value
        token = "" if raw_value is None else str(raw_value).strip().lower()
        if not token:
            return default
        try:
            return _BOOLEAN_SPELLINGS[token]
        except KeyError as exc:
            accepted = "/".join(_BOOLEAN_SPELLINGS)
            raise ValueError(
                f"{label} must be a boolean value, got `{raw_value}` (accepted: {accepted})."
            ) from exc

    @staticmethod
    def _optional_codec(raw_value: object) -> str:
        """Return the configured codec name, or the default for blank values."""

        name = "" if raw_value is None else str(raw_value).strip()
        return name or _DEFAULT_ENCODING

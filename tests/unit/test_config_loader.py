"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from ai_text_sanitizer.config import ConfigLoader, SanitizerConfig
from ai_text_sanitizer.models.datatypes import SanitizeOptions


def test_config_defaults_map_to_default_options() -> None:
    """An empty config should produce the sanitizer's default options."""

    config = SanitizerConfig()

    assert config.encoding == "utf-8"
    assert config.to_options() == SanitizeOptions()


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should parse boolean tokens and strip string values."""

    config_path = tmp_path / "sanitizer.yml"
    config_path.write_text(
        """
keep_emoji: " no "
collapse_spaces: off
encoding: " latin-1 "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.keep_emoji is False
    assert config.collapse_spaces is False
    assert config.encoding == "latin-1"
    assert config.to_options() == SanitizeOptions(keep_emoji=False, collapse_spaces=False)


def test_config_loader_from_yaml_uses_defaults_for_blank_and_missing_values(
    tmp_path: Path,
) -> None:
    """Blank or absent keys should fall back to dataclass defaults."""

    config_path = tmp_path / "sanitizer.yml"
    config_path.write_text("keep_emoji:\nencoding: ''\n", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == SanitizerConfig()


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML document should behave like an empty mapping."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == SanitizerConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """Unknown keys should be listed in the error message."""

    config_path = tmp_path / "unknown.yml"
    config_path.write_text("keep_emoji: true\nstrip_html: true\nzeta: 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): strip_html, zeta\."):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_payload(tmp_path: Path) -> None:
    """A YAML list at the top level should be rejected."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- keep_emoji\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a top-level mapping/object"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_invalid_boolean(tmp_path: Path) -> None:
    """Unrecognized boolean tokens should name the offending field."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("collapse_spaces: sometimes\n", encoding="utf-8")

    with pytest.raises(ValueError, match="field `collapse_spaces` must be a boolean value"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_unknown_encoding(tmp_path: Path) -> None:
    """Encoding names must resolve to a registered codec."""

    config_path = tmp_path / "codec.yml"
    config_path.write_text("encoding: not-a-codec\n", encoding="utf-8")

    with pytest.raises(ValueError, match="unknown codec: `not-a-codec`"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment variables should override defaults."""

    config = ConfigLoader.from_env(
        {
            "AI_TEXT_SANITIZER_KEEP_EMOJI": "false",
            "AI_TEXT_SANITIZER_COLLAPSE_SPACES": " YES ",
            "AI_TEXT_SANITIZER_ENCODING": "utf-16",
            "UNRELATED": "ignored",
        }
    )

    assert config == SanitizerConfig(keep_emoji=False, collapse_spaces=True, encoding="utf-16")


def test_config_loader_from_env_defaults_when_unset() -> None:
    """An empty environment should produce the default config."""

    assert ConfigLoader.from_env({}) == SanitizerConfig()


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Invalid environment booleans should name the variable."""

    with pytest.raises(
        ValueError,
        match="Environment variable `AI_TEXT_SANITIZER_KEEP_EMOJI` must be a boolean value",
    ):
        ConfigLoader.from_env({"AI_TEXT_SANITIZER_KEEP_EMOJI": "perhaps"})


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("1", True),
        ("yes", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
        ("0", False),
    ],
)
def test_config_loader_from_env_accepts_boolean_spellings(token: str, expected: bool) -> None:
    """Toggle values should accept every spelling case-insensitively."""

    config = ConfigLoader.from_env({"AI_TEXT_SANITIZER_COLLAPSE_SPACES": token})

    assert config.collapse_spaces is expected


@pytest.mark.parametrize("token", ["", "   "])
def test_config_loader_from_env_blank_toggle_uses_default(token: str) -> None:
    """Blank toggle values should fall back to the default instead of failing."""

    config = ConfigLoader.from_env(
        {"AI_TEXT_SANITIZER_KEEP_EMOJI": token, "AI_TEXT_SANITIZER_ENCODING": token}
    )

    assert config == SanitizerConfig()


def test_config_loader_from_yaml_accepts_integer_toggles(tmp_path: Path) -> None:
    """YAML integers `0`/`1` should be read as toggle values."""

    config_path = tmp_path / "sanitizer.yaml"
    config_path.write_text("keep_emoji: 0\ncollapse_spaces: 1\n", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.keep_emoji is False
    assert config.collapse_spaces is True


def test_invalid_boolean_message_names_value_and_accepted_spellings() -> None:
    """The error should quote the rejected value and list accepted spellings."""

    with pytest.raises(ValueError) as exc_info:
        ConfigLoader.from_env({"AI_TEXT_SANITIZER_COLLAPSE_SPACES": "2"})

    message = str(exc_info.value)
    assert "got `2`" in message
    assert "true/yes/on/1/false/no/off/0" in message


def test_with_overrides_replaces_only_explicit_values() -> None:
    """`None` overrides should keep loaded values."""

    base = SanitizerConfig(keep_emoji=False, collapse_spaces=False, encoding="latin-1")

    assert base.with_overrides() == base
    assert base.with_overrides(keep_emoji=True) == SanitizerConfig(
        keep_emoji=True, collapse_spaces=False, encoding="latin-1"
    )
    assert base.with_overrides(collapse_spaces=True, encoding="utf-8") == SanitizerConfig(
        keep_emoji=False, collapse_spaces=True, encoding="utf-8"
    )

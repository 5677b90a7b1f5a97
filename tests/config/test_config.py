# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest

from loxscan.config import CONFIG_FILE_NAME, ConfigError, ReporterConfig, load_config, parse_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_full_config(tmp_path: Path) -> None:
    """Both diagnostics fields are read from the file."""
    content = """\
diagnostics:
  color: true
  stream: stdout
"""
    config = load_config(_write_config(tmp_path, content))

    assert isinstance(config, ReporterConfig)
    assert config.color is True
    assert config.stream == "stdout"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty document yields the default settings."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == ReporterConfig(color=False, stream="stderr")


def test_missing_section_gives_defaults() -> None:
    assert parse_config("{}\n") == ReporterConfig()


def test_null_section_gives_defaults() -> None:
    assert parse_config("diagnostics:\n") == ReporterConfig()


def test_partial_section_keeps_other_defaults() -> None:
    config = parse_config("diagnostics:\n  color: true\n")
    assert config.color is True
    assert config.stream == "stderr"


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_directory_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path)


def test_invalid_yaml_raises() -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config("diagnostics: [unclosed\n")


def test_non_mapping_document_raises() -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_config("- a\n- b\n")


def test_non_mapping_section_raises() -> None:
    with pytest.raises(ConfigError, match="diagnostics must be a YAML mapping"):
        parse_config("diagnostics: yes\n")


def test_non_boolean_color_raises() -> None:
    with pytest.raises(ConfigError, match="'color' must be a boolean"):
        parse_config("diagnostics:\n  color: red\n")


def test_unknown_stream_raises() -> None:
    with pytest.raises(ConfigError, match="'stream' must be one of stderr, stdout"):
        parse_config("diagnostics:\n  stream: file\n")


def test_unknown_top_level_key_raises() -> None:
    with pytest.raises(ConfigError, match="unknown field"):
        parse_config("output: stdout\n")


def test_unknown_section_key_raises() -> None:
    with pytest.raises(ConfigError, match="unknown field\\(s\\): colour"):
        parse_config("diagnostics:\n  colour: true\n")


def test_error_message_includes_source_label(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "diagnostics:\n  color: 1\n")
    with pytest.raises(ConfigError, match=CONFIG_FILE_NAME):
        load_config(path)

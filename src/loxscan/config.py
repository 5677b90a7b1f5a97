# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the LoxScan configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".loxscan.yaml"

STREAM_NAMES = ("stderr", "stdout")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ReporterConfig:
    """Settings for printing lexical diagnostics.

    Attributes:
        color: Render diagnostics in color.
        stream: Name of the output stream, one of ``STREAM_NAMES``.
    """

    color: bool = False
    stream: str = "stderr"


def load_config(path: Path) -> ReporterConfig:
    """Load and parse a LoxScan configuration file.

    Args:
        path: Path to the `.loxscan.yaml` file.

    Returns:
        A ReporterConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ReporterConfig:
    """Parse configuration YAML text into a ReporterConfig.

    An empty document, or one without a ``diagnostics`` section, yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type or value.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ReporterConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")
    _reject_unknown_keys(data, {"diagnostics"}, source_label)

    section = data.get("diagnostics")
    if section is None:
        return ReporterConfig()
    location = f"{source_label}: diagnostics"
    if not isinstance(section, dict):
        raise ConfigError(f"{location} must be a YAML mapping")
    _reject_unknown_keys(section, {"color", "stream"}, location)

    config = ReporterConfig()
    if "color" in section:
        if not isinstance(section["color"], bool):
            raise ConfigError(f"{location}: 'color' must be a boolean")
        config.color = section["color"]
    if "stream" in section:
        stream = section["stream"]
        if stream not in STREAM_NAMES:
            raise ConfigError(f"{location}: 'stream' must be one of {', '.join(STREAM_NAMES)}")
        config.stream = stream
    return config


# ################
# Implementation
# ################


def _reject_unknown_keys(mapping: dict[str, object], allowed: set[str], location: str) -> None:
    unknown = sorted(str(key) for key in mapping if key not in allowed)
    if unknown:
        raise ConfigError(f"{location}: unknown field(s): {', '.join(unknown)}")

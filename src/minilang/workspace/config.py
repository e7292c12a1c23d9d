# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the optional ``.minilang.yaml`` analyzer configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".minilang.yaml"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class AnalyzerConfig:
    """Settings for an analysis run.

    Attributes:
        encoding: Text encoding used to read source files.
        legacy_constants: Reject unsigned numbers and strings in constant
            positions; only sign-prefixed numbers are accepted there.
        log_level: Name of the logging level used by the command-line driver.
    """

    encoding: str = "utf-8"
    legacy_constants: bool = False
    log_level: str = "WARNING"


def load_config(path: Path) -> AnalyzerConfig:
    """Load and parse an analyzer configuration file.

    Args:
        path: Path to the `.minilang.yaml` file.

    Returns:
        An AnalyzerConfig populated from the file; missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(directory: Path) -> Path | None:
    """Return the configuration file in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"encoding", "legacy-constants", "log-level"})


def _parse_config(text: str, source_label: str = "<string>") -> AnalyzerConfig:
    """Parse configuration YAML text into an AnalyzerConfig.

    Raises:
        ConfigError: If the YAML is invalid, a key is unknown or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return AnalyzerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown configuration key(s): {', '.join(unknown)}")

    config = AnalyzerConfig()
    if "encoding" in data:
        config.encoding = _require_string(data, "encoding", source_label)
    if "legacy-constants" in data:
        value = data["legacy-constants"]
        if not isinstance(value, bool):
            raise ConfigError(f"{source_label}: 'legacy-constants' must be a boolean")
        config.legacy_constants = value
    if "log-level" in data:
        level = _require_string(data, "log-level", source_label).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"{source_label}: 'log-level' must be one of {', '.join(LOG_LEVELS)}")
        config.log_level = level
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value

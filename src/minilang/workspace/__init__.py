# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analyzer configuration for MiniLang."""

from minilang.workspace.config import (
    CONFIG_FILE_NAME,
    LOG_LEVELS,
    AnalyzerConfig,
    ConfigError,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "LOG_LEVELS",
    "AnalyzerConfig",
    "ConfigError",
    "find_config",
    "load_config",
]

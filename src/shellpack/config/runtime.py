#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""shellpack runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from shellpack.config.defaults import (
    DEFAULT_EGO_URL,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_SCHEMA_FILE,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_name_list(value: str) -> frozenset[str]:
    """Split a comma separated list of names, ignoring blanks."""
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def parse_timeout(value: str | float) -> float:
    """Validate a positive timeout in seconds."""
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"Invalid timeout: {value}")
    return timeout


@define
class ShellpackRuntimeConfig(RuntimeConfig):
    """shellpack runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="SHELLPACK_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for shellpack operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var="SHELLPACK_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    exclude_dirs: str = field(
        default=",".join(sorted(DEFAULT_EXCLUDE_DIRS)),
        env_var="SHELLPACK_EXCLUDE_DIRS",
        metadata={"help": "Comma separated directory names skipped while formatting JSON"},
    )

    schema_file: str = field(
        default=DEFAULT_SCHEMA_FILE,
        env_var="SHELLPACK_SCHEMA_FILE",
        metadata={"help": "Build schema path, relative to the project root"},
    )

    ego_url: str = field(
        default=DEFAULT_EGO_URL,
        env_var="SHELLPACK_EGO_URL",
        metadata={"help": "extensions.gnome.org page of the published extension"},
    )

    http_timeout: float = field(
        default=DEFAULT_HTTP_TIMEOUT,
        env_var="SHELLPACK_HTTP_TIMEOUT",
        converter=parse_timeout,
        metadata={"help": "Timeout in seconds for the published version lookup"},
    )

    @property
    def excluded_dir_names(self) -> frozenset[str]:
        """Directory names to skip, as a set."""
        return parse_name_list(self.exclude_dirs)


# 🌶️📦🔚

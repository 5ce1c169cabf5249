#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console and logging helpers shared by the CLI commands."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.logger import get_logger

from shellpack.config import ShellpackRuntimeConfig


def get_command_logger(command: str) -> Any:
    """Return a structured logger scoped to a CLI command."""
    return get_logger(f"shellpack.commands.{command}")


def get_runtime_config(ctx: click.Context) -> ShellpackRuntimeConfig:
    """Return the config loaded by the CLI group, or load it from the environment."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), ShellpackRuntimeConfig):
        return obj["config"]
    return ShellpackRuntimeConfig.from_env()


# 🌶️📦🔚

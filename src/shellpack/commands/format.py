#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""JSON format command for the shellpack CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from shellpack.console import get_command_logger, get_runtime_config
from shellpack.exceptions import ShellpackError
from shellpack.package import format_project_json

# Get structured logger for this command
log = get_command_logger("format")


@click.command("format")
@click.argument(
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option(
    "--exclude",
    "excludes",
    multiple=True,
    help="Directory name to skip (repeatable). Replaces the configured exclusions.",
)
@click.pass_context
def format_command(ctx: click.Context, root: str, excludes: tuple[str, ...]) -> None:
    """Rewrite every JSON file under ROOT in canonical form."""
    exclude_dirs = frozenset(excludes) if excludes else get_runtime_config(ctx).excluded_dir_names
    log.debug("Formatting JSON", root=root, exclude_dirs=sorted(exclude_dirs))
    pout("Formatting JSON...")

    try:
        rewritten = format_project_json(Path(root), exclude_dirs)
    except ShellpackError as e:
        log.error("JSON formatting failed", error=str(e), root=root)
        perr(f"❌ JSON formatting failed: {e}")
        raise click.Abort() from e

    if rewritten:
        pout(f"✅ Formatted {len(rewritten)} JSON file(s)")
    else:
        pout("✅ All JSON files already canonical")


# 🌶️📦🔚

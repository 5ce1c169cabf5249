#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Version badge command for the shellpack CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from shellpack.console import get_command_logger, get_runtime_config
from shellpack.exceptions import ShellpackError
from shellpack.package import sync_version_badges
from shellpack.release.badges import BadgeAction

# Get structured logger for this command
log = get_command_logger("badges")


@click.command("badges")
@click.option(
    "--project-dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Extension project root.",
)
@click.option("--url", "ego_url", help="extensions.gnome.org page of the extension.")
@click.pass_context
def badges_command(ctx: click.Context, project_dir: str, ego_url: str | None) -> None:
    """Compares local and published versions and updates README badges."""
    config = get_runtime_config(ctx)
    ego_url = ego_url or config.ego_url
    log.debug("Syncing version badges", project_dir=project_dir, url=ego_url)
    pout("Fetching published version from GNOME Extensions...")

    try:
        update = sync_version_badges(Path(project_dir), ego_url=ego_url, timeout=config.http_timeout)
    except (ShellpackError, OSError) as e:
        log.error("Badge update failed", error=str(e), project_dir=project_dir)
        perr(f"❌ Error updating README: {e}")
        raise click.Abort() from e

    if update.action is BadgeAction.NO_ANCHOR:
        perr("⚠️  Could not find badge markers or 'Status: Live' line in README.md")
        return

    pout(f"✅ Updated version badges in README.md ({update.action.value})")
    pout(f"   Status: {update.summary}")


# 🌶️📦🔚

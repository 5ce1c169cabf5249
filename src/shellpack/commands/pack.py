#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pack command for the shellpack CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from shellpack.commands.validate import report_mismatch
from shellpack.console import get_command_logger, get_runtime_config
from shellpack.exceptions import SchemaMismatchError, ShellpackError
from shellpack.package import build_extension_package

# Get structured logger for this command
log = get_command_logger("pack")


@click.command("pack")
@click.option(
    "--project-dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Extension project root.",
)
@click.option(
    "--skip-format",
    is_flag=True,
    help="Do not canonicalize project JSON before packaging.",
)
@click.pass_context
def pack_command(ctx: click.Context, project_dir: str, skip_format: bool) -> None:
    """Builds the extension ZIP for extensions.gnome.org and validates it."""
    config = get_runtime_config(ctx)
    project_root = Path(project_dir)
    log.debug("Packing extension", project_dir=project_dir, skip_format=skip_format)
    pout("🏗️  Building extension package...")

    try:
        archive_path, report = build_extension_package(
            project_root,
            schema_path=project_root / config.schema_file,
            exclude_dirs=config.excluded_dir_names,
            format_json=not skip_format,
        )
    except SchemaMismatchError as e:
        log.error("Package failed schema validation", project_dir=project_dir)
        report_mismatch(e)
        perr("❌ Packaging Failed: archive does not match the build schema")
        raise click.Abort() from e
    except ShellpackError as e:
        log.error("Packaging failed", error=str(e), project_dir=project_dir)
        perr(f"❌ Packaging Failed: {e}")
        raise click.Abort() from e

    log.info("Package created", archive=str(archive_path), files=len(report.found))
    pout("✅ ZIP contents validated against schema.")
    pout("")
    pout("✅ Extension package ready!")
    pout(f"📦 Package: {archive_path.name} ({format_size(archive_path.stat().st_size)})")
    pout(f"📁 Location: {archive_path}")
    pout("Upload this file to: https://extensions.gnome.org/")


# 🌶️📦🔚

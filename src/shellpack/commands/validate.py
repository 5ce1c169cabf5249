#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Validate command for the shellpack CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from shellpack.console import get_command_logger, get_runtime_config
from shellpack.exceptions import SchemaMismatchError, ShellpackError
from shellpack.package import validate_package

# Get structured logger for this command
log = get_command_logger("validate")


@click.command("validate")
@click.argument(
    "archive",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--schema",
    "schema_file",
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Build schema to validate against (default: configured schema file in the current directory).",
)
@click.pass_context
def validate_command(ctx: click.Context, archive: str, schema_file: str | None) -> None:
    """Checks that ARCHIVE contains exactly the files the build schema allows."""
    archive_path = Path(archive)
    schema_path = Path(schema_file) if schema_file else Path.cwd() / get_runtime_config(ctx).schema_file
    log.debug("Validating archive", archive=str(archive_path), schema=str(schema_path))
    pout("🔍 Validating ZIP contents against schema...")

    try:
        validate_package(archive_path, schema_path)
    except SchemaMismatchError as e:
        report_mismatch(e)
        raise click.Abort() from e
    except ShellpackError as e:
        log.error("Validation failed", error=str(e), archive=str(archive_path))
        perr(f"❌ Validation failed: {e}")
        raise click.Abort() from e

    pout("✅ ZIP contents validated against schema.")


def report_mismatch(error: SchemaMismatchError) -> None:
    """Print every discrepancy of a failed validation to stderr."""
    for line in error.report.lines():
        perr(line if line.startswith(" ") else f"❌ {line}")


# 🌶️📦🔚

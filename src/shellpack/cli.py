#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""shellpack command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from shellpack.commands.badges import badges_command
from shellpack.commands.format import format_command
from shellpack.commands.pack import pack_command
from shellpack.commands.validate import validate_command
from shellpack.config import ShellpackRuntimeConfig

__version__ = get_version("shellpack", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="shellpack",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """GNOME Shell extension packaging tool.

    Configure via environment variables:
    - SHELLPACK_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - SHELLPACK_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - SHELLPACK_EXCLUDE_DIRS: Comma separated directories skipped by 'format'
    - SHELLPACK_SCHEMA_FILE: Build schema path relative to the project root
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    shellpack_config = ShellpackRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="shellpack",
        logging=evolve(
            base_telemetry.logging,
            default_level=shellpack_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = shellpack_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(format_command, name="format")
cli.add_command(validate_command, name="validate")
cli.add_command(pack_command, name="pack")
cli.add_command(badges_command, name="badges")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚

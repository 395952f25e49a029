#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""gdsave command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from gdsave.commands.decode import decode_command
from gdsave.commands.encode import encode_command
from gdsave.config import GDSaveRuntimeConfig

__version__ = get_version("gdsave", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="gdsave",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Geometry Dash save file transcoder.

    Configure via environment variables:
    - GDSAVE_LOG_LEVEL: Set log level for gdsave (trace, debug, info, warning, error)
    - GDSAVE_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - GDSAVE_CANONICALIZE_ON_ENCODE: Re-format XML before encoding (default: true)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    gdsave_config = GDSaveRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="gdsave",
        logging=evolve(
            base_telemetry.logging,
            default_level=gdsave_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = gdsave_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(decode_command, name="decode")
cli.add_command(encode_command, name="encode")

main = cli

if __name__ == "__main__":
    cli()

# 🎮💾🔚

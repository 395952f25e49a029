#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encode command for the gdsave CLI - XML back to a save file."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import pout

from gdsave.commands.common import check_platform, progress_printer, run_session
from gdsave.config.defaults import DEFAULT_CANONICALIZE_ON_ENCODE
from gdsave.console import get_command_logger
from gdsave.pipeline import Direction
from gdsave.session import TranscodeSession

# Get structured logger for this command
log = get_command_logger("encode")


@click.command("encode")
@click.argument(
    "xml_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_path",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=False,
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.option(
    "--canonicalize/--no-canonicalize",
    default=None,
    help="Re-format the XML before compressing (default from GDSAVE_CANONICALIZE_ON_ENCODE)",
)
@click.option(
    "--allow-macos",
    is_flag=True,
    help="Run even on macOS, where saves use a different scheme",
)
@click.pass_context
def encode_command(
    ctx: click.Context,
    xml_file: str,
    output_path: str | None,
    force: bool,
    canonicalize: bool | None,
    allow_macos: bool,
) -> None:
    """Encode an XML file back into the save format.

    OUTPUT_PATH defaults to the XML file name with a .dat suffix.
    """
    check_platform(log, allow_macos)
    if canonicalize is None:
        config = (ctx.obj or {}).get("config")
        canonicalize = config.canonicalize_on_encode if config is not None else DEFAULT_CANONICALIZE_ON_ENCODE

    input_path = Path(xml_file)
    log.debug(
        "Encoding save",
        input=str(input_path),
        output=output_path,
        force=force,
        canonicalize=canonicalize,
    )
    pout(f"🔒 Encoding '{input_path.name}'...")

    session = TranscodeSession(
        Direction.ENCODE,
        canonicalize_input=canonicalize,
        progress=progress_printer,
    )
    run_session(session, input_path, Path(output_path) if output_path else None, force, log)


# 🎮💾🔚

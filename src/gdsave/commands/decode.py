#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decode command for the gdsave CLI - save file to XML."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import pout

from gdsave.commands.common import check_platform, progress_printer, run_session
from gdsave.console import get_command_logger
from gdsave.pipeline import Direction
from gdsave.session import TranscodeSession

# Get structured logger for this command
log = get_command_logger("decode")


@click.command("decode")
@click.argument(
    "save_file",
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
    "--allow-macos",
    is_flag=True,
    help="Run even on macOS, where saves use a different scheme",
)
def decode_command(save_file: str, output_path: str | None, force: bool, allow_macos: bool) -> None:
    """Decode a save file into readable XML.

    OUTPUT_PATH defaults to the save file name with an .xml suffix.
    """
    check_platform(log, allow_macos)
    input_path = Path(save_file)
    log.debug("Decoding save", input=str(input_path), output=output_path, force=force)
    pout(f"🔓 Decoding '{input_path.name}'...")

    session = TranscodeSession(Direction.DECODE, progress=progress_printer)
    run_session(session, input_path, Path(output_path) if output_path else None, force, log)


# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared logic for the decode and encode commands."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from gdsave.config.defaults import UNSUPPORTED_PLATFORMS
from gdsave.exceptions import GDSaveError
from gdsave.pipeline import Stage, StageStatus
from gdsave.session import OutputResult, TranscodeSession


def check_platform(log: Any, allow_macos: bool) -> None:
    """Refuse to run where saves use a different obfuscation scheme."""
    if sys.platform in UNSUPPORTED_PLATFORMS and not allow_macos:
        log.error("Unsupported platform", platform=sys.platform)
        perr("❌ macOS save files are encrypted differently and cannot be transcoded.")
        perr("Use --allow-macos to try anyway")
        raise click.Abort()


def progress_printer(stage: Stage, status: StageStatus) -> None:
    """Print one line per completed or failed stage."""
    if status is StageStatus.COMPLETED:
        pout(f"   ✓ {stage.value}")
    elif status is StageStatus.FAILED:
        perr(f"   ✗ {stage.value}")


def run_session(
    session: TranscodeSession,
    input_path: Path,
    output_path: Path | None,
    force: bool,
    log: Any,
) -> None:
    """Select the input, run the pipeline and write the output."""
    result = session.select(input_path)
    failure = result.failure
    if failure is not None:
        log.error(
            "Transcode failed",
            stage=failure.stage.value,
            error=failure.detail,
            input=str(input_path),
        )
        perr(f"❌ {session.direction.value.capitalize()} failed at {failure.stage.value} stage: {failure.detail}")
        raise click.Abort()

    output = output_path or session.default_output_path()
    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    try:
        written = session.write_output(output)
    except GDSaveError as e:
        log.error("Error writing output", error=str(e), output=str(output))
        perr(f"❌ Error writing output: {e}")
        raise click.Abort() from e

    if written is OutputResult.FILE_CREATED:
        size = len(result.output_bytes())
        pout(f"✅ Wrote {output} ({format_size(size)})")


# 🎮💾🔚

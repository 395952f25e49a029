#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Input selection and output writing around the pipeline."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from attrs import define, field
from provide.foundation import logger
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_parent_dir

from gdsave.config.defaults import DEFAULT_CANONICALIZE_ON_ENCODE
from gdsave.exceptions import IoFailureError, NoInputSelectedError
from gdsave.pipeline import (
    Direction,
    ProgressCallback,
    Stage,
    TranscodeResult,
    transcode,
)


@define(frozen=True)
class Unselected:
    """No input file has been chosen yet."""


@define(frozen=True)
class Selected:
    """An input file was chosen and transcoded."""

    path: Path
    result: TranscodeResult


Source = Unselected | Selected


class OutputResult(Enum):
    FILE_CREATED = "file_created"
    FILE_NOT_CREATED = "file_not_created"


@define
class TranscodeSession:
    """Holds one selected input and its transcoded output until written."""

    direction: Direction
    canonicalize_input: bool = DEFAULT_CANONICALIZE_ON_ENCODE
    progress: ProgressCallback | None = None
    source: Source = field(factory=Unselected)

    @property
    def is_selected(self) -> bool:
        return isinstance(self.source, Selected)

    def select(self, path: Path) -> TranscodeResult:
        """Read a file and run the pipeline on it right away."""
        logger.debug("Selecting input file", direction=self.direction.value, path=str(path))

        try:
            data = _read_input(path)
        except IoFailureError as e:
            result = TranscodeResult.failed(self.direction, e)
        else:
            result = transcode(
                self.direction,
                data,
                canonicalize_input=self.canonicalize_input,
                progress=self.progress,
            )

        self.source = Selected(path=path, result=result)
        return result

    def reset(self) -> None:
        self.source = Unselected()

    def default_output_name(self) -> str:
        """Output file name derived from the input stem, e.g. ``CCGameManager.xml``."""
        source = self._require_selected()
        return f"{source.path.stem}{self.direction.output_suffix}"

    def default_output_path(self) -> Path:
        source = self._require_selected()
        return source.path.with_name(self.default_output_name())

    def write_output(self, destination: Path | None) -> OutputResult:
        """Write the transcoded output.

        Returns FILE_NOT_CREATED when no destination is given or the transcode
        failed; nothing is written in either case.

        Raises:
            NoInputSelectedError: If no input was selected
            IoFailureError: If writing the file fails
        """
        source = self._require_selected()
        if destination is None:
            logger.debug("No output destination given")
            return OutputResult.FILE_NOT_CREATED
        if not source.result.ok:
            logger.debug("Nothing to write, transcode failed", path=str(source.path))
            return OutputResult.FILE_NOT_CREATED

        data = source.result.output_bytes()
        try:
            ensure_parent_dir(destination)
            atomic_write(destination, data)
        except OSError as e:
            logger.error("Failed to write output file", output=str(destination), error=str(e))
            raise IoFailureError(f"Cannot write {destination}: {e}", stage=Stage.WRITE) from e

        logger.info("Output written", output=str(destination), size=len(data))
        return OutputResult.FILE_CREATED

    def _require_selected(self) -> Selected:
        if not isinstance(self.source, Selected):
            raise NoInputSelectedError("No file selected to save to")
        return self.source


def _read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error("Failed to read input file", path=str(path), error=str(e))
        raise IoFailureError(f"Cannot read {path}: {e}", stage=Stage.READ) from e


# 🎮💾🔚

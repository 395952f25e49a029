#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decode and encode pipelines for Geometry Dash save files.

Decode: XOR unmask, trim trailing NULs, Base64 decode, GZip decompress,
canonicalize XML. Encode runs the same stages backwards, with the XML
canonicalization step optional.

``decode_save``/``encode_save`` raise stage-tagged :class:`TranscodeError`
subclasses. ``decode``/``encode`` wrap them into a :class:`TranscodeResult`
for callers that must never see an exception.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from attrs import define
from provide.foundation import logger

from gdsave.codec import (
    b64_decode,
    b64_encode,
    canonicalize,
    gzip_compress,
    gzip_decompress,
    strip_trailing_nulls,
    xor_mask,
    xor_unmask,
)
from gdsave.config.defaults import SAVE_SUFFIX, XML_SUFFIX
from gdsave.exceptions import GDSaveError, TranscodeError

T = TypeVar("T")

ProgressCallback = Callable[["Stage", "StageStatus"], None]


class Stage(Enum):
    """Pipeline stages, used to tag failures and progress events."""

    READ = "read"
    XOR = "xor"
    PADDING = "padding"
    BASE64 = "base64"
    GZIP = "gzip"
    XML = "xml"
    WRITE = "write"


class StageStatus(Enum):
    STARTED = "started"
    COMPLETED = "completed"
    FAILED = "failed"


class Direction(Enum):
    """Transcoding direction and the file suffixes that go with it."""

    DECODE = "decode"
    ENCODE = "encode"

    @property
    def input_suffix(self) -> str:
        return SAVE_SUFFIX if self is Direction.DECODE else XML_SUFFIX

    @property
    def output_suffix(self) -> str:
        return XML_SUFFIX if self is Direction.DECODE else SAVE_SUFFIX


@define(frozen=True)
class TranscodeFailure:
    """A failed transcode, tagged with the stage that failed."""

    stage: Stage
    detail: str
    error: TranscodeError

    @property
    def kind(self) -> str:
        """Name of the error type, e.g. ``InvalidEncodingError``."""
        return type(self.error).__name__


@define(frozen=True)
class TranscodeResult:
    """Outcome of a pipeline run: either output or a failure, never both."""

    direction: Direction
    output: bytes | str | None = None
    failure: TranscodeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, direction: Direction, output: bytes | str) -> TranscodeResult:
        return cls(direction=direction, output=output)

    @classmethod
    def failed(cls, direction: Direction, error: TranscodeError) -> TranscodeResult:
        stage = error.stage if error.stage is not None else Stage.READ
        return cls(
            direction=direction,
            failure=TranscodeFailure(stage=stage, detail=str(error), error=error),
        )

    def unwrap(self) -> bytes | str:
        """Return the output, re-raising the stage error on failure."""
        if self.failure is not None:
            raise self.failure.error
        if self.output is None:
            raise GDSaveError("Transcode result carries no output")
        return self.output

    def output_bytes(self) -> bytes:
        """Return the output as bytes ready to be written to disk."""
        output = self.unwrap()
        return output.encode("utf-8") if isinstance(output, str) else output


def _notify(progress: ProgressCallback | None, stage: Stage, status: StageStatus) -> None:
    if progress is not None:
        progress(stage, status)


def _run_stage(
    stage: Stage,
    func: Callable[[Any], T],
    data: bytes,
    progress: ProgressCallback | None,
) -> T:
    """Run one stage, tagging any TranscodeError with the stage."""
    logger.debug("Stage started", stage=stage.value, input_size=len(data))
    _notify(progress, stage, StageStatus.STARTED)
    try:
        result = func(data)
    except TranscodeError as e:
        e.stage = stage
        logger.debug("Stage failed", stage=stage.value, error=str(e))
        _notify(progress, stage, StageStatus.FAILED)
        raise
    logger.debug("Stage completed", stage=stage.value, output_size=len(result))  # type: ignore[arg-type]
    _notify(progress, stage, StageStatus.COMPLETED)
    return result


def decode_save(raw: bytes, progress: ProgressCallback | None = None) -> str:
    """Turn a raw save file into canonical XML text.

    Raises:
        InvalidEncodingError: Base64 stage failed
        CorruptStreamError: GZip stage failed
        MalformedXmlError: XML stage failed
    """
    unmasked = _run_stage(Stage.XOR, xor_unmask, raw, progress)
    trimmed = _run_stage(Stage.PADDING, strip_trailing_nulls, unmasked, progress)
    compressed = _run_stage(Stage.BASE64, b64_decode, trimmed, progress)
    document = _run_stage(Stage.GZIP, gzip_decompress, compressed, progress)
    return _run_stage(Stage.XML, canonicalize, document, progress)


def _canonical_bytes(data: bytes) -> bytes:
    return canonicalize(data).encode("utf-8")


def encode_save(
    xml: bytes,
    canonicalize_input: bool = True,
    progress: ProgressCallback | None = None,
) -> bytes:
    """Turn XML bytes into the raw save format.

    Args:
        xml: XML document bytes
        canonicalize_input: Re-format the document before compressing
        progress: Optional callback receiving (stage, status) pairs

    Raises:
        MalformedXmlError: XML stage failed
    """
    if canonicalize_input:
        xml = _run_stage(Stage.XML, _canonical_bytes, xml, progress)
    compressed = _run_stage(Stage.GZIP, gzip_compress, xml, progress)
    encoded = _run_stage(Stage.BASE64, b64_encode, compressed, progress)
    return _run_stage(Stage.XOR, xor_mask, encoded, progress)


def decode(raw: bytes, progress: ProgressCallback | None = None) -> TranscodeResult:
    """Decode a raw save, returning a result instead of raising."""
    try:
        text = decode_save(raw, progress=progress)
    except TranscodeError as e:
        logger.debug("Decode failed", stage=e.stage.value if e.stage else None, error=str(e))
        return TranscodeResult.failed(Direction.DECODE, e)
    logger.info("Decode completed", input_size=len(raw), output_size=len(text))
    return TranscodeResult.success(Direction.DECODE, text)


def encode(
    xml: bytes,
    canonicalize_input: bool = True,
    progress: ProgressCallback | None = None,
) -> TranscodeResult:
    """Encode an XML document, returning a result instead of raising."""
    try:
        raw = encode_save(xml, canonicalize_input=canonicalize_input, progress=progress)
    except TranscodeError as e:
        logger.debug("Encode failed", stage=e.stage.value if e.stage else None, error=str(e))
        return TranscodeResult.failed(Direction.ENCODE, e)
    logger.info("Encode completed", input_size=len(xml), output_size=len(raw))
    return TranscodeResult.success(Direction.ENCODE, raw)


def transcode(
    direction: Direction,
    data: bytes,
    canonicalize_input: bool = True,
    progress: ProgressCallback | None = None,
) -> TranscodeResult:
    """Dispatch to :func:`decode` or :func:`encode`."""
    if direction is Direction.DECODE:
        return decode(data, progress=progress)
    return encode(data, canonicalize_input=canonicalize_input, progress=progress)


# 🎮💾🔚

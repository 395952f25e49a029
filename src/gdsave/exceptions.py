#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for gdsave."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from provide.foundation.errors import FoundationError

if TYPE_CHECKING:
    from gdsave.pipeline import Stage


class GDSaveError(FoundationError):
    """Base exception for all gdsave errors."""

    pass


class NoInputSelectedError(GDSaveError):
    """Raised when output is requested before an input file was selected."""

    pass


class TranscodeError(GDSaveError):
    """Base exception for failures inside a pipeline stage.

    The stage is filled in by the pipeline when the error crosses a stage
    boundary, so codec functions can raise without knowing where they run.
    """

    def __init__(self, message: str, *, stage: Stage | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.stage = stage


class InvalidEncodingError(TranscodeError):
    """Raised when Base64 text contains foreign characters or bad padding."""

    pass


class CorruptStreamError(TranscodeError):
    """Raised when a GZip container is invalid or truncated."""

    pass


class MalformedXmlError(TranscodeError):
    """Raised when a document is not well-formed XML."""

    pass


class IoFailureError(TranscodeError):
    """Raised when reading the input or writing the output fails."""

    pass


# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""gdsave core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from gdsave.exceptions import (
    CorruptStreamError,
    GDSaveError,
    InvalidEncodingError,
    IoFailureError,
    MalformedXmlError,
    NoInputSelectedError,
    TranscodeError,
)
from gdsave.pipeline import (
    Direction,
    Stage,
    TranscodeFailure,
    TranscodeResult,
    decode,
    decode_save,
    encode,
    encode_save,
)
from gdsave.session import OutputResult, TranscodeSession

__version__ = get_version("gdsave", caller_file=__file__)

__all__ = [
    "CorruptStreamError",
    "Direction",
    "GDSaveError",
    "InvalidEncodingError",
    "IoFailureError",
    "MalformedXmlError",
    "NoInputSelectedError",
    "OutputResult",
    "Stage",
    "TranscodeError",
    "TranscodeFailure",
    "TranscodeResult",
    "TranscodeSession",
    "__version__",
    "decode",
    "decode_save",
    "encode",
    "encode_save",
]

# 🎮💾🔚

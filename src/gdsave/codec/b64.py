#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""URL-safe Base64 with mandatory padding."""

from __future__ import annotations

import base64
import binascii
import re

from gdsave.exceptions import InvalidEncodingError

# Alphabet characters followed by at most two padding characters
_URLSAFE_PATTERN = re.compile(rb"[A-Za-z0-9\-_]*={0,2}")


def b64_encode(data: bytes) -> bytes:
    """Encode bytes with the URL-safe alphabet, always padded."""
    return base64.urlsafe_b64encode(data)


def b64_decode(data: bytes) -> bytes:
    """Decode URL-safe Base64 text.

    Unlike ``base64.urlsafe_b64decode`` this rejects characters outside the
    alphabet instead of silently discarding them.

    Raises:
        InvalidEncodingError: If data has foreign characters or bad padding
    """
    match = _URLSAFE_PATTERN.fullmatch(data)
    if match is None:
        offset = _first_invalid_offset(data)
        raise InvalidEncodingError(
            f"Invalid Base64 character at offset {offset}",
            offset=offset,
        )
    if len(data) % 4:
        raise InvalidEncodingError(
            f"Invalid Base64 length {len(data)}, expected a multiple of 4",
            length=len(data),
        )

    try:
        return base64.urlsafe_b64decode(data)
    except binascii.Error as e:
        raise InvalidEncodingError(f"Invalid Base64 data: {e}") from e


def _first_invalid_offset(data: bytes) -> int:
    """Return the offset of the first byte that breaks the alphabet rule."""
    prefix = re.match(rb"[A-Za-z0-9\-_]*", data)
    end = prefix.end() if prefix else 0
    padding = re.match(rb"={0,2}", data[end:])
    return end + (padding.end() if padding else 0)


# 🎮💾🔚

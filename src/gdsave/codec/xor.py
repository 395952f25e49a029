#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Single-byte XOR masking and the trailing NUL trim of the save format."""

from __future__ import annotations

from gdsave.config.defaults import XOR_KEY


def xor_mask(data: bytes, key: int = XOR_KEY) -> bytes:
    """
    XOR every byte of data with a single-byte key.

    Args:
        data: Bytes to mask
        key: Key byte (defaults to the save format key)

    Returns:
        Masked bytes of the same length
    """
    if not 0 <= key <= 0xFF:
        raise ValueError(f"XOR key out of range: {key}")
    return data.translate(bytes(b ^ key for b in range(256)))


def xor_unmask(data: bytes, key: int = XOR_KEY) -> bytes:
    """
    Remove a single-byte XOR mask.

    Since XOR is symmetric, this is the same as masking.

    Args:
        data: Masked bytes
        key: Key byte (defaults to the save format key)

    Returns:
        Unmasked bytes
    """
    return xor_mask(data, key)  # XOR is its own inverse


def strip_trailing_nulls(data: bytes) -> bytes:
    """Drop the run of zero bytes at the end of data.

    Saves written by the game are padded with bytes that unmask to NUL.
    Interior zero bytes are left alone.
    """
    return data.rstrip(b"\x00")


# 🎮💾🔚

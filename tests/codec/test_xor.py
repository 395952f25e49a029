#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for XOR masking and the trailing NUL trim."""

from __future__ import annotations

import os

import pytest

from gdsave.codec.xor import strip_trailing_nulls, xor_mask, xor_unmask
from gdsave.config.defaults import XOR_KEY


@pytest.mark.unit
class TestXorMask:
    """Test the single-byte XOR transform."""

    def test_default_key_is_eleven(self) -> None:
        assert XOR_KEY == 11
        assert xor_mask(b"\x00\x0b\xff") == b"\x0b\x00\xf4"

    def test_preserves_length(self) -> None:
        data = os.urandom(257)
        assert len(xor_mask(data)) == len(data)

    def test_empty_input(self) -> None:
        assert xor_mask(b"") == b""

    @pytest.mark.parametrize("key", [0, 1, 11, 0x5A, 0xFF])
    def test_self_inverse(self, key: int) -> None:
        data = bytes(range(256)) * 3
        assert xor_mask(xor_mask(data, key), key) == data

    def test_unmask_matches_mask(self) -> None:
        data = b"H4sIAAAAAAAA"
        assert xor_unmask(xor_mask(data)) == data
        assert xor_unmask(data) == xor_mask(data)

    def test_zero_key_is_identity(self) -> None:
        assert xor_mask(b"abc", 0) == b"abc"

    @pytest.mark.parametrize("key", [-1, 256])
    def test_key_out_of_range(self, key: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            xor_mask(b"abc", key)


@pytest.mark.unit
class TestStripTrailingNulls:
    """Test the padding normalizer."""

    def test_strips_trailing_run(self) -> None:
        assert strip_trailing_nulls(b"abc\x00\x00\x00") == b"abc"

    def test_keeps_interior_nulls(self) -> None:
        assert strip_trailing_nulls(b"a\x00b\x00") == b"a\x00b"

    def test_noop_without_trailing_null(self) -> None:
        data = b"a\x00\x00b"
        assert strip_trailing_nulls(data) == data

    def test_idempotent(self) -> None:
        once = strip_trailing_nulls(b"QUJD\x00\x00")
        assert strip_trailing_nulls(once) == once

    def test_all_nulls_becomes_empty(self) -> None:
        assert strip_trailing_nulls(b"\x00\x00") == b""
        assert strip_trailing_nulls(b"") == b""


# 🎮💾🔚

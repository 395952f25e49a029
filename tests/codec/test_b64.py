#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the URL-safe Base64 codec."""

from __future__ import annotations

import math
import os

import pytest

from gdsave.codec.b64 import b64_decode, b64_encode
from gdsave.exceptions import InvalidEncodingError, TranscodeError


@pytest.mark.unit
class TestBase64Encode:
    """Test encoding."""

    def test_uses_urlsafe_alphabet(self) -> None:
        # 0xfb 0xff 0xbf encodes to "+/+/" in the standard alphabet
        assert b64_encode(b"\xfb\xff\xbf") == b"-_-_"

    def test_pads_output(self) -> None:
        assert b64_encode(b"a") == b"YQ=="
        assert b64_encode(b"ab") == b"YWI="

    @pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 100, 1001])
    def test_output_length(self, size: int) -> None:
        assert len(b64_encode(os.urandom(size))) == 4 * math.ceil(size / 3)

    def test_roundtrip(self) -> None:
        data = os.urandom(4096)
        assert b64_decode(b64_encode(data)) == data


@pytest.mark.unit
class TestBase64Decode:
    """Test decoding and its failure modes."""

    def test_decodes_urlsafe_characters(self) -> None:
        assert b64_decode(b"-_-_") == b"\xfb\xff\xbf"

    def test_empty_input(self) -> None:
        assert b64_decode(b"") == b""

    @pytest.mark.parametrize(
        "data",
        [b"YQ!=", b"ab!d", b"+/+/", b"YW I", b"YWI=\n", b"\x00AAA"],
    )
    def test_rejects_foreign_characters(self, data: bytes) -> None:
        with pytest.raises(InvalidEncodingError, match="Invalid Base64 character"):
            b64_decode(data)

    def test_reports_offset_of_bad_character(self) -> None:
        with pytest.raises(InvalidEncodingError, match="offset 2"):
            b64_decode(b"ab!d")

    @pytest.mark.parametrize("data", [b"YQ", b"YWJjZ", b"YQ="])
    def test_rejects_missing_padding(self, data: bytes) -> None:
        with pytest.raises(InvalidEncodingError, match="length"):
            b64_decode(data)

    @pytest.mark.parametrize("data", [b"Y===", b"YQ=A", b"=AAA"])
    def test_rejects_misplaced_padding(self, data: bytes) -> None:
        with pytest.raises(InvalidEncodingError):
            b64_decode(data)

    def test_is_a_transcode_error(self) -> None:
        with pytest.raises(TranscodeError):
            b64_decode(b"!!!!")


# 🎮💾🔚

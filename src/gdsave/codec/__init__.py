#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Byte-level transforms used by the save pipeline."""

from __future__ import annotations

from gdsave.codec.b64 import b64_decode, b64_encode
from gdsave.codec.canonical_xml import canonicalize
from gdsave.codec.compression import gzip_compress, gzip_decompress
from gdsave.codec.xor import strip_trailing_nulls, xor_mask, xor_unmask

__all__ = [
    "b64_decode",
    "b64_encode",
    "canonicalize",
    "gzip_compress",
    "gzip_decompress",
    "strip_trailing_nulls",
    "xor_mask",
    "xor_unmask",
]

# 🎮💾🔚

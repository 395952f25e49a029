#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""GZip compression bridge to provide.foundation archive tools."""

from __future__ import annotations

import zlib

from provide.foundation import logger
from provide.foundation.archive import GzipCompressor
from provide.foundation.archive.base import ArchiveError

from gdsave.config.defaults import GZIP_LEVEL
from gdsave.exceptions import CorruptStreamError

GZIP_MAGIC = b"\x1f\x8b"


def gzip_compress(data: bytes) -> bytes:
    """Wrap data in a GZip container at the default compression level."""
    compressed = GzipCompressor(level=GZIP_LEVEL).compress_bytes(data)
    logger.debug("GZip compressed", input_size=len(data), output_size=len(compressed))
    return compressed


def gzip_decompress(data: bytes) -> bytes:
    """Decompress a GZip container.

    The output buffer grows with the stream, there is no size cap.

    Raises:
        CorruptStreamError: If the header is invalid or the stream is truncated
    """
    if data[:2] != GZIP_MAGIC:
        raise CorruptStreamError(
            "Not a GZip stream (bad magic bytes)",
            magic=data[:2].hex(),
        )

    try:
        decompressed = GzipCompressor().decompress_bytes(data)
    except ArchiveError as e:
        raise CorruptStreamError(f"GZip decompression failed: {e}") from e
    except (OSError, EOFError, zlib.error) as e:
        # Truncated members surface as EOFError from the gzip module
        raise CorruptStreamError(f"GZip decompression failed: {e}") from e

    logger.debug("GZip decompressed", input_size=len(data), output_size=len(decompressed))
    return decompressed


# 🎮💾🔚

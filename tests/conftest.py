#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for gdsave tests."""

from __future__ import annotations

import base64
from collections.abc import Callable, Iterator
import gzip
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

SAMPLE_XML = (
    b'<?xml version="1.0"?>'
    b'<plist version="1.0" gjver="2.0">'
    b"<dict>"
    b"<k>valueKeeper</k><d><k>gv_0001</k><s>1</s></d>"
    b"<!-- player stats -->"
    b"<k>GS_value</k><d><k>1</k><i>1234</i><k>2</k><i>56</i></d>"
    b"<k>playerName</k><s>RobTop &amp; friends</s>"
    b"<k>empty</k><d></d>"
    b"</dict>"
    b"</plist>"
)


def make_raw_save(xml: bytes, padding: int = 0, key: int = 11) -> bytes:
    """Build a raw save the way the game writes it: gzip, base64, NUL pad, XOR."""
    encoded = base64.urlsafe_b64encode(gzip.compress(xml)) + b"\x00" * padding
    return bytes(b ^ key for b in encoded)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    # Reset again after test to ensure clean state
    reset_foundation_setup_for_testing()


@pytest.fixture
def make_save() -> Callable[..., bytes]:
    """Factory for raw save blobs."""
    return make_raw_save


@pytest.fixture
def sample_xml() -> bytes:
    return SAMPLE_XML


@pytest.fixture
def raw_save(tmp_path: Path) -> Path:
    """A padded save file on disk named like the real one."""
    path = tmp_path / "CCGameManager.dat"
    path.write_bytes(make_raw_save(SAMPLE_XML, padding=3))
    return path


# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for Foundation-based runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from gdsave.config import GDSaveRuntimeConfig, parse_bool, parse_log_level


class TestParsers:
    """Test value converters."""

    def test_log_level_normalized(self) -> None:
        assert parse_log_level(" debug ") == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("chatty")

    @pytest.mark.parametrize("value", ["1", "true", "Yes", "ON", True])
    def test_truthy(self, value: str | bool) -> None:
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off", False])
    def test_falsy(self, value: str | bool) -> None:
        assert parse_bool(value) is False

    def test_invalid_bool(self) -> None:
        with pytest.raises(ValueError, match="Invalid boolean"):
            parse_bool("maybe")


class TestRuntimeConfig:
    """Test environment loading."""

    def test_defaults(self) -> None:
        config = GDSaveRuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.setup_log_level == "WARNING"
        assert config.canonicalize_on_encode is True

    @patch.dict(
        os.environ,
        {
            "GDSAVE_LOG_LEVEL": "debug",
            "GDSAVE_CANONICALIZE_ON_ENCODE": "false",
        },
    )
    def test_from_env(self) -> None:
        config = GDSaveRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.canonicalize_on_encode is False


# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""gdsave runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from gdsave.config.defaults import DEFAULT_CANONICALIZE_ON_ENCODE, DEFAULT_LOG_LEVEL

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_bool(value: bool | str) -> bool:
    """Accept booleans and the usual environment spellings of them."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


@define
class GDSaveRuntimeConfig(RuntimeConfig):
    """gdsave runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="GDSAVE_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for gdsave operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="GDSAVE_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    canonicalize_on_encode: bool = field(
        default=DEFAULT_CANONICALIZE_ON_ENCODE,
        env_var="GDSAVE_CANONICALIZE_ON_ENCODE",
        converter=parse_bool,
        metadata={"help": "Re-format XML before compressing it on encode"},
    )


# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""gdsave configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from gdsave.config.runtime import GDSaveRuntimeConfig, parse_bool, parse_log_level

__all__ = [
    "GDSaveRuntimeConfig",
    "parse_bool",
    "parse_log_level",
]

# 🎮💾🔚

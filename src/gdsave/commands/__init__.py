#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the gdsave CLI."""

from __future__ import annotations

from gdsave.commands.decode import decode_command
from gdsave.commands.encode import encode_command

__all__ = [
    "decode_command",
    "encode_command",
]

# 🎮💾🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for gdsave."""

from __future__ import annotations

# =================================
# Obfuscation defaults
# =================================
XOR_KEY = 11  # Single-byte key used by the Windows/Linux save format

# =================================
# Compression defaults
# =================================
GZIP_LEVEL = 6  # zlib default level

# =================================
# XML output defaults
# =================================
XML_INDENT = "  "
XML_LINE_SEPARATOR = "\n"
XML_DEFAULT_VERSION = "1.0"
XML_OUTPUT_ENCODING = "UTF-8"

# =================================
# File naming defaults
# =================================
SAVE_SUFFIX = ".dat"
XML_SUFFIX = ".xml"

# =================================
# Runtime defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CANONICALIZE_ON_ENCODE = True

# Platforms whose saves use a different scheme
UNSUPPORTED_PLATFORMS = {"darwin"}

# 🎮💾🔚

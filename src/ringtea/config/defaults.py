#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for RingTEA."""

from __future__ import annotations

# =================================
# Cipher layout
# =================================
WORD_SIZE = 4  # Bytes per little-endian word
KEY_WORDS = 4  # 128-bit key
KEY_SIZE = WORD_SIZE * KEY_WORDS  # Key bytes actually consulted

# =================================
# Transport formats
# =================================
FORMAT_RAW = "raw"
FORMAT_HEX = "hex"
FORMAT_BASE64 = "base64"

OUTPUT_FORMATS = (FORMAT_RAW, FORMAT_HEX, FORMAT_BASE64)

DEFAULT_OUTPUT_FORMAT = FORMAT_BASE64

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# 🍵🔁🔚

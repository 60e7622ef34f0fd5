#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RingTEA configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from ringtea.config.runtime import RingTeaRuntimeConfig, parse_log_level, parse_output_format

__all__ = [
    "RingTeaRuntimeConfig",
    "parse_log_level",
    "parse_output_format",
]

# 🍵🔁🔚

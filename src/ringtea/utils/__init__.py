#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Helper utilities for RingTEA."""

from __future__ import annotations

from ringtea.utils.text import decode_transport, encode_transport

__all__ = [
    "decode_transport",
    "encode_transport",
]

# 🍵🔁🔚

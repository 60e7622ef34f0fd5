#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XXTEA mixing function and 32-bit arithmetic helpers."""

from __future__ import annotations

from collections.abc import Sequence

DELTA = 0x9E3779B9  # floor(2**32 / golden ratio)
MASK = 0xFFFFFFFF


def mx(total: int, y: int, z: int, p: int, e: int, key: Sequence[int]) -> int:
    """
    Compute the XXTEA mixing term for one word update.

    Args:
        total: Running round sum (uint32)
        y: Right-hand neighbour of the word being updated
        z: Left-hand neighbour (the most recently updated word)
        p: Position of the word being updated
        e: Round key selector, ``(total >> 2) & 3``
        key: Four uint32 key words

    Returns:
        The mixing term, masked to 32 bits
    """
    # Operands are non-negative and below 2**32, so ``>>`` is a logical shift.
    return (
        (((z >> 5) ^ (y << 2)) + ((y >> 3) ^ (z << 4))) ^ ((total ^ y) + (key[(p & 3) ^ e] ^ z))
    ) & MASK


def round_count(n: int) -> int:
    """Number of full rounds for a buffer whose last index is ``n``."""
    return 6 + 52 // (n + 1)


# 🍵🔁🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the XXTEA mixing term and round schedule."""

from __future__ import annotations

import pytest

from ringtea.mixing import DELTA, MASK, mx, round_count


@pytest.mark.unit
class TestMix:
    """Test the mx() mixing function."""

    def test_all_zero_inputs(self) -> None:
        """Test that zero state and zero key mix to zero."""
        assert mx(0, 0, 0, 0, 0, [0, 0, 0, 0]) == 0

    @pytest.mark.parametrize(
        ("p", "e", "index"),
        [
            (0, 0, 0),
            (1, 0, 1),
            (3, 0, 3),
            (4, 0, 0),
            (5, 0, 1),
            (0, 1, 1),
            (1, 1, 0),
            (2, 3, 1),
            (7, 2, 1),
        ],
    )
    def test_key_word_selection(self, p: int, e: int, index: int) -> None:
        """Test that the key word is chosen by (p & 3) ^ e."""
        key = [0x11111111, 0x22222222, 0x33333333, 0x44444444]
        # With total = y = z = 0 every other term vanishes.
        assert mx(0, 0, 0, p, e, key) == key[index]

    def test_result_is_32_bit(self) -> None:
        """Test that results wrap to 32 bits for maximal operands."""
        result = mx(MASK, MASK, MASK, 3, 3, [MASK] * 4)
        assert 0 <= result <= MASK

    def test_right_shift_is_logical(self) -> None:
        """Test that high bits shift right without sign extension."""
        z = 0x80000000
        # z << 4 overflows past bit 31, leaving z >> 5 and the key ^ z term.
        expected = ((z >> 5) + 0) ^ ((0 ^ 0) + (0 ^ z))
        assert mx(0, 0, z, 0, 0, [0, 0, 0, 0]) == expected & MASK

    def test_delta_constant(self) -> None:
        """Test the golden-ratio constant."""
        assert DELTA == 0x9E3779B9


@pytest.mark.unit
class TestRoundCount:
    """Test the number of rounds derived from buffer size."""

    @pytest.mark.parametrize(
        ("n", "rounds"),
        [
            (0, 58),
            (1, 32),
            (2, 23),
            (3, 19),
            (12, 10),
            (25, 8),
            (51, 7),
            (52, 6),
            (1000, 6),
        ],
    )
    def test_round_count(self, n: int, rounds: int) -> None:
        """Test q = 6 + 52 // (n + 1)."""
        assert round_count(n) == rounds

# 🍵🔁🔚

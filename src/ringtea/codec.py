#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Conversion between byte strings and little-endian 32-bit word buffers."""

from __future__ import annotations

import struct

from ringtea.config.defaults import KEY_WORDS, WORD_SIZE
from ringtea.exceptions import MalformedCiphertextError

BytesLike = bytes | bytearray | memoryview | str


def to_bytes(data: BytesLike, what: str = "data") -> bytes:
    """Coerce supported inputs to ``bytes``; text is encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, bytes | bytearray | memoryview):
        return bytes(data)
    raise TypeError(f"{what} must be bytes-like or str, not {type(data).__name__}")


def bytes_to_words(data: bytes, include_length: bool) -> list[int]:
    """
    Unpack a byte string into uint32 words, zero-padding the tail.

    Args:
        data: Input bytes, any length
        include_length: Append ``len(data)`` as a trailing sentinel word

    Returns:
        List of uint32 words
    """
    padded = data + b"\x00" * (-len(data) % WORD_SIZE)
    words = list(struct.unpack(f"<{len(padded) // WORD_SIZE}I", padded))
    if include_length:
        words.append(len(data))
    return words


def words_to_bytes(words: list[int], truncate: bool) -> bytes:
    """
    Pack uint32 words back into a byte string.

    With ``truncate`` the last word is read as the original byte length,
    checked against the buffer size, and the output is cut to that length.

    Raises:
        MalformedCiphertextError: If the sentinel length is out of range
    """
    size = len(words) * WORD_SIZE
    if truncate:
        sentinel = words[-1]
        size -= WORD_SIZE
        if sentinel < size - 3 or sentinel > size:
            raise MalformedCiphertextError(
                f"Length sentinel {sentinel} does not fit a {size}-byte payload",
                context={"sentinel": sentinel, "capacity": size},
            )
        size = sentinel
    packed = struct.pack(f"<{len(words)}I", *words)
    if truncate:
        return packed[:size]
    return packed


def key_to_words(key: bytes) -> list[int]:
    """Decode key material into exactly four words.

    Short keys are zero-filled. Anything past the first 16 bytes is ignored,
    matching every other XXTEA implementation on the wire.
    """
    words = bytes_to_words(key, include_length=False)[:KEY_WORDS]
    return words + [0] * (KEY_WORDS - len(words))


# 🍵🔁🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XXTEA (Corrected Block TEA) encryption over arbitrary-length byte strings.

The message is treated as a single ring of 32-bit words. Encryption appends
the plaintext length as a final word before mixing, so decryption can strip
the zero padding exactly and reject buffers whose length does not add up.

Only the first 16 bytes of a key are used. Longer keys are accepted and the
excess is silently ignored, as in the reference algorithm; changing that
would break interoperability with existing ciphertext.
"""

from __future__ import annotations

from collections.abc import Sequence

from provide.foundation import logger

from ringtea.codec import BytesLike, bytes_to_words, key_to_words, to_bytes, words_to_bytes
from ringtea.config.defaults import KEY_WORDS, WORD_SIZE
from ringtea.exceptions import MalformedCiphertextError
from ringtea.mixing import DELTA, MASK, mx, round_count


def _key_words(key: Sequence[int] | BytesLike) -> list[int]:
    if isinstance(key, bytes | bytearray | memoryview | str):
        return key_to_words(to_bytes(key, "key"))
    words = [int(k) & MASK for k in key[:KEY_WORDS]]
    return words + [0] * (KEY_WORDS - len(words))


def encrypt_words(words: list[int], key: Sequence[int] | BytesLike) -> list[int]:
    """
    Encrypt a word buffer in place with the raw XXTEA transform.

    No length sentinel is added; callers working on bytes should use
    :func:`encrypt` instead.

    A single-word buffer gets only the wraparound update each round, where
    the word is its own neighbour. That update cannot be undone, so one-word
    buffers are not invertible. The byte API never produces them.

    Args:
        words: uint32 words, modified in place
        key: Four key words, or key bytes

    Returns:
        The same list, now holding ciphertext words
    """
    if not words:
        return words
    k = _key_words(key)
    v = words
    n = len(v) - 1
    rounds = round_count(n)
    total = 0
    z = v[n]
    for _ in range(rounds):
        total = (total + DELTA) & MASK
        e = (total >> 2) & 3
        for p in range(n):
            y = v[p + 1]
            v[p] = (v[p] + mx(total, y, z, p, e, k)) & MASK
            z = v[p]
        # Wraparound: the last word's right-hand neighbour is v[0].
        y = v[0]
        v[n] = (v[n] + mx(total, y, z, n, e, k)) & MASK
        z = v[n]
    return v


def decrypt_words(words: list[int], key: Sequence[int] | BytesLike) -> list[int]:
    """
    Decrypt a word buffer in place with the raw XXTEA transform.

    Inverse of :func:`encrypt_words` for the same key when the buffer holds
    at least two words. A single word is transformed as the reference
    algorithm does, but does not recover what :func:`encrypt_words` was given.
    """
    if not words:
        return words
    k = _key_words(key)
    v = words
    n = len(v) - 1
    total = (round_count(n) * DELTA) & MASK
    y = v[0]
    while total != 0:
        e = (total >> 2) & 3
        for p in range(n, 0, -1):
            z = v[p - 1]
            v[p] = (v[p] - mx(total, y, z, p, e, k)) & MASK
            y = v[p]
        z = v[n]
        v[0] = (v[0] - mx(total, y, z, 0, e, k)) & MASK
        y = v[0]
        total = (total - DELTA) & MASK
    return v


def encrypt(data: BytesLike, key: BytesLike) -> bytes:
    """
    Encrypt a byte string with XXTEA.

    Args:
        data: Plaintext; ``str`` is encoded as UTF-8
        key: Key material, 16 bytes for a full 128-bit key

    Returns:
        Ciphertext, four bytes longer than the word-padded plaintext.
        Empty plaintext gives empty ciphertext.
    """
    plaintext = to_bytes(data)
    if not plaintext:
        return b""
    v = bytes_to_words(plaintext, include_length=True)
    logger.debug("XXTEA encrypt", size=len(plaintext), words=len(v), rounds=round_count(len(v) - 1))
    encrypt_words(v, key_to_words(to_bytes(key, "key")))
    return words_to_bytes(v, truncate=False)


def decrypt(data: BytesLike, key: BytesLike) -> bytes:
    """
    Decrypt a byte string produced by :func:`encrypt`.

    Raises:
        MalformedCiphertextError: If the ciphertext is shorter than one word
            or its embedded length does not match the buffer size
    """
    ciphertext = to_bytes(data)
    if not ciphertext:
        return b""
    if len(ciphertext) < WORD_SIZE:
        raise MalformedCiphertextError(
            f"Ciphertext of {len(ciphertext)} bytes is shorter than one word",
            context={"size": len(ciphertext)},
        )
    v = bytes_to_words(ciphertext, include_length=False)
    logger.debug("XXTEA decrypt", size=len(ciphertext), words=len(v), rounds=round_count(len(v) - 1))
    decrypt_words(v, key_to_words(to_bytes(key, "key")))
    try:
        return words_to_bytes(v, truncate=True)
    except MalformedCiphertextError:
        logger.debug("Rejected ciphertext with invalid length sentinel", size=len(ciphertext))
        raise


# 🍵🔁🔚

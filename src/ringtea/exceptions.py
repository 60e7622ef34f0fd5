#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for RingTEA."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class RingTeaError(FoundationError):
    """Base exception for all ringtea-related errors."""

    pass


class MalformedCiphertextError(RingTeaError):
    """Raised when a ciphertext cannot have come from encryption.

    Either the buffer is shorter than one 32-bit word, or the length
    sentinel recovered after decryption does not fit the buffer size.
    """

    pass


class EncodingError(RingTeaError):
    """Raised when hex or base64 transport text cannot be decoded."""

    pass


# Name used by the PHP library and the PECL extension docs.
MalformedCiphertext = MalformedCiphertextError


# 🍵🔁🔚

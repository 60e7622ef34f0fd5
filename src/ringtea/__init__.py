#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RingTEA: XXTEA encryption for byte strings of any length."""

from __future__ import annotations

from provide.foundation.utils import get_version

from ringtea.compat import xxtea_decrypt, xxtea_encrypt
from ringtea.core import decrypt, decrypt_words, encrypt, encrypt_words
from ringtea.exceptions import (
    EncodingError,
    MalformedCiphertext,
    MalformedCiphertextError,
    RingTeaError,
)
from ringtea.mixing import DELTA

__version__ = get_version("ringtea", caller_file=__file__)

__all__ = [
    "DELTA",
    "EncodingError",
    "MalformedCiphertext",
    "MalformedCiphertextError",
    "RingTeaError",
    "__version__",
    "decrypt",
    "decrypt_words",
    "encrypt",
    "encrypt_words",
    "xxtea_decrypt",
    "xxtea_encrypt",
]

# 🍵🔁🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Function names matching the PECL ``xxtea`` extension.

Code written against ``xxtea_encrypt``/``xxtea_decrypt`` can import these
directly. Nothing here probes for a native module; pick an implementation
by choosing what to import.
"""

from __future__ import annotations

from ringtea.codec import BytesLike
from ringtea.core import decrypt, encrypt


def xxtea_encrypt(data: BytesLike, key: BytesLike) -> bytes:
    """Encrypt ``data`` with ``key``. Same as :func:`ringtea.encrypt`."""
    return encrypt(data, key)


def xxtea_decrypt(data: BytesLike, key: BytesLike) -> bytes:
    """Decrypt ``data`` with ``key``. Same as :func:`ringtea.decrypt`."""
    return decrypt(data, key)


# 🍵🔁🔚

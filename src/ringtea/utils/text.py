#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Transport encodings for ciphertext on text channels."""

from __future__ import annotations

import base64
import binascii

from ringtea.config.defaults import FORMAT_BASE64, FORMAT_HEX, FORMAT_RAW
from ringtea.exceptions import EncodingError


def encode_transport(data: bytes, fmt: str) -> bytes:
    """
    Encode binary data for output.

    Args:
        data: Bytes to encode
        fmt: One of ``raw``, ``hex`` or ``base64``

    Returns:
        Encoded bytes; text formats end with a newline
    """
    if fmt == FORMAT_RAW:
        return data
    if fmt == FORMAT_HEX:
        return data.hex().encode("ascii") + b"\n"
    if fmt == FORMAT_BASE64:
        return base64.b64encode(data) + b"\n"
    raise ValueError(f"Unknown transport format: {fmt}")


def decode_transport(data: bytes, fmt: str) -> bytes:
    """
    Decode input produced by :func:`encode_transport`.

    Surrounding whitespace is ignored for the text formats.

    Raises:
        EncodingError: If the text is not valid for ``fmt``
    """
    if fmt == FORMAT_RAW:
        return data
    text = b"".join(data.split())
    try:
        if fmt == FORMAT_HEX:
            return bytes.fromhex(text.decode("ascii"))
        if fmt == FORMAT_BASE64:
            return base64.b64decode(text, validate=True)
    except (ValueError, binascii.Error) as e:
        raise EncodingError(f"Input is not valid {fmt}: {e}", context={"format": fmt}) from e
    raise ValueError(f"Unknown transport format: {fmt}")


# 🍵🔁🔚

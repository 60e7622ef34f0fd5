#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encrypt and decrypt commands for the ringtea CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO

import click
from provide.foundation import logger
from provide.foundation.console import perr

from ringtea.config import RingTeaRuntimeConfig
from ringtea.config.defaults import KEY_SIZE, OUTPUT_FORMATS
from ringtea.core import decrypt, encrypt
from ringtea.exceptions import EncodingError, MalformedCiphertextError
from ringtea.utils.text import decode_transport, encode_transport


def _resolve_key(key: str | None, key_hex: str | None, config: RingTeaRuntimeConfig) -> bytes:
    """Pick key material from the command line or environment."""
    if key is not None and key_hex is not None:
        raise click.UsageError("Use only one of --key and --key-hex")
    if key_hex is not None:
        try:
            material = bytes.fromhex(key_hex)
        except ValueError as e:
            raise click.BadParameter(f"not valid hex: {e}", param_hint="--key-hex") from e
    elif key is not None:
        material = key.encode("utf-8")
    elif config.key is not None:
        material = config.key.encode("utf-8")
    else:
        raise click.UsageError("A key is required: pass --key, --key-hex or set RINGTEA_KEY")

    if len(material) > KEY_SIZE:
        logger.warning(
            "Key longer than 16 bytes, extra bytes are ignored",
            key_size=len(material),
            used=KEY_SIZE,
        )
    return material


def _cipher_options(func: Callable[..., None]) -> Callable[..., None]:
    """Options shared by encrypt and decrypt."""
    options = [
        click.option("--key", "-k", default=None, help="Key as UTF-8 text (first 16 bytes are used)."),
        click.option("--key-hex", default=None, help="Key as hexadecimal bytes."),
        click.option(
            "--input",
            "-i",
            "input_file",
            type=click.File("rb"),
            default="-",
            help="Input file (default: stdin).",
        ),
        click.option(
            "--output",
            "-o",
            "output_file",
            type=click.File("wb"),
            default="-",
            help="Output file (default: stdout).",
        ),
        click.option(
            "--format",
            "fmt",
            type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
            default=None,
            help="Ciphertext encoding (default: RINGTEA_FORMAT or base64).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("encrypt")
@_cipher_options
def encrypt_command(
    key: str | None,
    key_hex: str | None,
    input_file: BinaryIO,
    output_file: BinaryIO,
    fmt: str | None,
) -> None:
    """Encrypts INPUT with XXTEA and writes the ciphertext."""
    config = RingTeaRuntimeConfig.from_env()
    fmt = (fmt or config.output_format).lower()
    material = _resolve_key(key, key_hex, config)

    plaintext = input_file.read()
    log_ctx = {"size": len(plaintext), "format": fmt}
    logger.debug("Encrypting input", **log_ctx)

    ciphertext = encrypt(plaintext, material)
    output_file.write(encode_transport(ciphertext, fmt))
    output_file.flush()
    logger.info("Encryption complete", ciphertext_size=len(ciphertext), **log_ctx)


@click.command("decrypt")
@_cipher_options
def decrypt_command(
    key: str | None,
    key_hex: str | None,
    input_file: BinaryIO,
    output_file: BinaryIO,
    fmt: str | None,
) -> None:
    """Decrypts XXTEA ciphertext from INPUT and writes the plaintext."""
    config = RingTeaRuntimeConfig.from_env()
    fmt = (fmt or config.output_format).lower()
    material = _resolve_key(key, key_hex, config)

    logger.debug("Decrypting input", format=fmt)

    try:
        ciphertext = decode_transport(input_file.read(), fmt)
        plaintext = decrypt(ciphertext, material)
    except EncodingError as e:
        logger.error("Could not decode ciphertext", error=str(e), format=fmt)
        perr(f"❌ Could not decode ciphertext: {e}")
        raise click.Abort() from e
    except MalformedCiphertextError as e:
        logger.error("Decryption failed", error=str(e))
        perr(f"❌ Decryption failed: {e}")
        raise click.Abort() from e

    output_file.write(plaintext)
    output_file.flush()
    logger.info("Decryption complete", size=len(plaintext))


# 🍵🔁🔚

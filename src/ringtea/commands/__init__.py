#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the ringtea CLI."""

from __future__ import annotations

from ringtea.commands.cipher import decrypt_command, encrypt_command

__all__ = [
    "decrypt_command",
    "encrypt_command",
]

# 🍵🔁🔚

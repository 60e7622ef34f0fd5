#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RingTEA runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from ringtea.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    VALID_LOG_LEVELS,
)


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_output_format(value: str) -> str:
    """Validate and normalize transport format names."""
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format: {value}")
    return normalized


@define
class RingTeaRuntimeConfig(RuntimeConfig):
    """RingTEA runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="RINGTEA_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for RingTEA operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    output_format: str = field(
        default=DEFAULT_OUTPUT_FORMAT,
        env_var="RINGTEA_FORMAT",
        converter=parse_output_format,
        metadata={"help": "Transport encoding of ciphertext on the command line (raw, hex, base64)"},
    )

    key: str | None = field(
        default=None,
        env_var="RINGTEA_KEY",
        metadata={"help": "Default key for encrypt/decrypt when --key is not given"},
    )

# 🍵🔁🔚

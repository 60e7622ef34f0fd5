#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for RingTEA tests."""

from __future__ import annotations

from collections.abc import Iterator

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

# Sixteen ASCII bytes, a full 128-bit key
FULL_KEY = b"0123456789abcdef"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit test")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def key() -> bytes:
    """A full-length 16-byte key."""
    return FULL_KEY


@pytest.fixture(autouse=True)
def clean_ringtea_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RINGTEA_* settings out of the tests."""
    for name in ("RINGTEA_KEY", "RINGTEA_FORMAT", "RINGTEA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

# 🍵🔁🔚

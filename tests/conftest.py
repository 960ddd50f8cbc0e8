"""Pytest configuration shared by the test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on the asyncio backend Textual uses."""
    return "asyncio"

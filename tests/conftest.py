"""Pytest fixtures shared by the effect tests."""

from __future__ import annotations

import pytest

from tests.helpers import Recorder


@pytest.fixture
def recorder() -> Recorder:
    """Fresh callback recorder per test."""
    return Recorder()

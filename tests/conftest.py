"""Shared fixtures."""

import pytest

from tests.fakes import FakeSession


@pytest.fixture
def fake_session() -> FakeSession:
    """Create an empty fake session; tests queue responses on it."""
    return FakeSession()

"""Shared fixtures."""

from __future__ import annotations

import pytest

from tests.documents import StubSession


@pytest.fixture
def stub_session():
    return StubSession

# tricommon/tests/conftest.py
"""
Shared fixtures for the tricommon test suite.
"""
import pytest

from tricommon.utils.log_sinks import ListSink


@pytest.fixture
def sink() -> ListSink:
    """An in-memory sink for asserting on emitted lines."""
    return ListSink()

"""Shared test fixtures for httpdt."""

import pytest

from httpdt.clock import FixedClock
from httpdt.main import create_app

# Sun, 06 Nov 1994 08:49:37 GMT
RFC_EXAMPLE_SECS = 784111777


@pytest.fixture
def fixed_clock():
    """Clock pinned to the RFC 7231 example instant."""
    return FixedClock(RFC_EXAMPLE_SECS)


@pytest.fixture
def app(fixed_clock):
    """Create the demo app reading the fixed clock."""
    app = create_app(fixed_clock)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for the demo app."""
    with app.test_client() as client:
        yield client

"""
Pytest configuration and fixtures for djust-tz tests.
"""

import datetime
from unittest.mock import MagicMock

import pytest
from django.test import RequestFactory


@pytest.fixture
def request_factory():
    """Provide Django RequestFactory for creating test requests."""
    return RequestFactory()


@pytest.fixture
def rf():
    """Alias for request_factory (pytest-django convention)."""
    return RequestFactory()


@pytest.fixture
def utc_noon():
    """2026-01-20 12:00 UTC, a winter instant (no DST in the northern hemisphere)."""
    return datetime.datetime(2026, 1, 20, 12, 0, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def make_view():
    """Build a LiveView stand-in with the given client_timezone."""

    def _make(client_timezone=None, **attrs):
        view = MagicMock()
        view.client_timezone = client_timezone
        for name, value in attrs.items():
            setattr(view, name, value)
        return view

    return _make


@pytest.fixture(autouse=True)
def reset_tz_config():
    """Restore the global djust-tz configuration after each test."""
    from djust_tz.config import config

    yield

    config.reset()

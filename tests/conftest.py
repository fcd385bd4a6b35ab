"""
Pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def words():
    """Sample words for grouping tests."""
    return ["a", "bb", "ccc", "dd"]


@pytest.fixture
def plus_one_hour():
    """A datetime at UTC+01:00."""
    return datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=1)))

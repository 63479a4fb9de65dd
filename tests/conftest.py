"""
Pytest configuration for the Air Quality Monitor tests.

Registers custom markers and provides shared fixtures.
"""

from datetime import datetime, timezone

import pytest

from frontend.models import Reading


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def ok_payload():
    """A successful WAQI feed response."""
    return {
        "status": "ok",
        "data": {
            "aqi": 42,
            "iaqi": {"pm25": {"v": 5}},
            "time": {"iso": "2024-01-01T00:00:00Z"},
        },
    }


@pytest.fixture
def reading():
    """A reading with every pollutant populated."""
    return Reading(
        index=80,
        particulate2_5=35,
        particulate10=20,
        nitrogen_dioxide=12,
        ozone=30,
        carbon_monoxide=4,
        observed_at=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )

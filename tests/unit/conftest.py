"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from scalike.config import reset_settings

# The autouse settings fixture below runs once per test, not per example.
settings.register_profile("scalike", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("scalike")


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Every test starts from settings freshly loaded from the environment."""
    reset_settings()
    yield
    reset_settings()
